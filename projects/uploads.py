from core.media import upload_file, upload_files

THUMBNAIL_FOLDER = 'projects/thumbnails'
IMAGES_FOLDER    = 'projects/images'


def apply_project_uploads(project, files):
    """Replace thumbnail / images with freshly uploaded files, when present."""
    thumbnail = files.get('thumbnail')
    if thumbnail:
        project.thumbnail = upload_file(thumbnail, THUMBNAIL_FOLDER)
    images = files.getlist('images')
    if images:
        project.images = upload_files(images, IMAGES_FOLDER)
    return project
