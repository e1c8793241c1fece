"""
Media storage collaborator: pushes uploaded files to Cloudinary and hands
back durable URLs for the handlers to persist.
"""
import logging

import cloudinary.exceptions
import cloudinary.uploader
from django.conf import settings

from .exceptions import ServerError

logger = logging.getLogger(__name__)


def upload_file(file, folder):
    target = f'{settings.CLOUDINARY_FOLDER}/{folder}'
    try:
        result = cloudinary.uploader.upload(file, folder=target, resource_type='auto')
    except cloudinary.exceptions.Error as exc:
        logger.error('Cloudinary upload to %s failed: %s', target, exc)
        raise ServerError('Media upload failed') from exc
    logger.info('Uploaded %s to %s', getattr(file, 'name', 'file'), target)
    return result['secure_url']


def upload_files(files, folder):
    return [upload_file(file, folder) for file in files]
