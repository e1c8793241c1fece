import logging

from rest_framework.permissions import SAFE_METHODS, AllowAny
from rest_framework.views       import APIView

from core.exceptions  import ClientError, ResourceNotFound
from core.media       import upload_file, upload_files
from core.permissions import IsAdmin
from core.responses   import success_response
from .models          import ABOUT_US_DEFAULT_TITLE, HomePage
from .serializers     import (
    AboutUsSerializer,
    CarouselImageSerializer,
    CategorySerializer,
    HomePageSerializer,
    TestimonialSerializer,
)

logger = logging.getLogger(__name__)


class HomeContentView(APIView):
    """Reads are public, every mutation needs the admin role."""

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [AllowAny()]
        return [IsAdmin()]


class HomePageView(HomeContentView):
    """GET /api/v1/home/homepage/"""

    def get(self, request):
        homepage = HomePage.load()
        return success_response('Homepage retrieved successfully', {
            'homepage': HomePageSerializer(homepage).data,
        })


# ─── Collections (carousel / category / testimonial) ─────────────────────────

class HomeEntryMixin:
    """
    Configuration shared by a collection's list and detail views.

    related_name   — collection accessor on HomePage
    file_field     — multipart field carrying uploaded images
    many_files     — one entry per uploaded file instead of a single file
    image_required — reject entries that end up without any image
    """
    serializer_class = None
    related_name     = None
    list_key         = None
    item_key         = None
    label            = None
    list_label       = None
    file_field       = None
    upload_folder    = None
    many_files       = False
    image_required   = False
    missing_image_message = None

    def collection(self, homepage):
        return getattr(homepage, self.related_name)

    def list_payload(self, homepage):
        return {self.list_key: self.serializer_class(self.collection(homepage).all(), many=True).data}

    def uploaded_images(self, request):
        if self.many_files:
            files = request.FILES.getlist(self.file_field)
        else:
            file = request.FILES.get(self.file_field)
            files = [file] if file else []
        return upload_files(files, self.upload_folder)


class HomeEntryListView(HomeEntryMixin, HomeContentView):

    def get(self, request):
        homepage = HomePage.load()
        return success_response(f'{self.list_label} retrieved', self.list_payload(homepage))

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        image_urls = self.uploaded_images(request)
        if not image_urls and data.get('image'):
            image_urls = [data['image']]
        if not image_urls and self.image_required:
            raise ClientError(self.missing_image_message)

        homepage = HomePage.load()
        collection = self.collection(homepage)
        for url in image_urls or ['']:
            collection.create(**{**data, 'image': url})

        logger.info('%s added to homepage by admin %s', self.label, request.user.pk)
        return success_response(f'{self.label} added', self.list_payload(homepage))


class HomeEntryDetailView(HomeEntryMixin, HomeContentView):

    def get_entry(self, homepage, pk):
        entry = self.collection(homepage).filter(pk=pk).first()
        if entry is None:
            raise ResourceNotFound(self.label)
        return entry

    def put(self, request, pk):
        homepage = HomePage.load()
        entry = self.get_entry(homepage, pk)

        serializer = self.serializer_class(entry, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        image_urls = self.uploaded_images(request)
        if image_urls:
            entry = serializer.save(image=image_urls[0])
        else:
            entry = serializer.save()

        logger.info('%s %s updated by admin %s', self.label, pk, request.user.pk)
        return success_response(f'{self.label} updated', {
            self.item_key: self.serializer_class(entry).data,
        })

    def delete(self, request, pk):
        homepage = HomePage.load()
        entry = self.get_entry(homepage, pk)
        entry.delete()

        logger.info('%s %s deleted by admin %s', self.label, pk, request.user.pk)
        return success_response(f'{self.label} deleted', self.list_payload(homepage))


class CarouselMixin:
    serializer_class = CarouselImageSerializer
    related_name     = 'carousel_images'
    list_key         = 'carousel_images'
    item_key         = 'carousel_image'
    label            = 'Carousel image'
    list_label       = 'Carousel images'
    file_field       = 'carousel_images'
    upload_folder    = 'homepage/carousel'
    many_files       = True
    image_required   = True
    missing_image_message = 'No image provided for carousel item'


class CategoryMixin:
    serializer_class = CategorySerializer
    related_name     = 'categories'
    list_key         = 'categories'
    item_key         = 'category'
    label            = 'Category'
    list_label       = 'Categories'
    file_field       = 'category_image'
    upload_folder    = 'homepage/categories'
    image_required   = True
    missing_image_message = 'No image provided for category'


class TestimonialMixin:
    serializer_class = TestimonialSerializer
    related_name     = 'testimonials'
    list_key         = 'testimonials'
    item_key         = 'testimonial'
    label            = 'Testimonial'
    list_label       = 'Testimonials'
    file_field       = 'testimonial_image'
    upload_folder    = 'homepage/testimonials'


class CarouselListView(CarouselMixin, HomeEntryListView):
    """GET/POST /api/v1/home/homepage/carousel/"""


class CarouselDetailView(CarouselMixin, HomeEntryDetailView):
    """PUT/DELETE /api/v1/home/homepage/carousel/<id>/"""


class CategoryListView(CategoryMixin, HomeEntryListView):
    """GET/POST /api/v1/home/homepage/category/"""


class CategoryDetailView(CategoryMixin, HomeEntryDetailView):
    """PUT/DELETE /api/v1/home/homepage/category/<id>/"""


class TestimonialListView(TestimonialMixin, HomeEntryListView):
    """GET/POST /api/v1/home/homepage/testimonial/"""


class TestimonialDetailView(TestimonialMixin, HomeEntryDetailView):
    """PUT/DELETE /api/v1/home/homepage/testimonial/<id>/"""


# ─── About us ─────────────────────────────────────────────────────────────────

class AboutUsView(HomeContentView):
    """
    GET    /api/v1/home/homepage/aboutus/
    POST   /api/v1/home/homepage/aboutus/        — fill in, keeping existing values for blanks
    PUT    /api/v1/home/homepage/aboutus[/<id>]/ — overwrite the supplied fields
    DELETE /api/v1/home/homepage/aboutus[/<id>]/ — reset to the default block

    The optional <id> is accepted for older clients and ignored: there is
    only one about-us block.
    """
    file_field    = 'about_image'
    upload_folder = 'homepage/about'

    def _payload(self, homepage):
        return {'about_us': AboutUsSerializer(homepage).data}

    def _uploaded_image(self, request):
        file = request.FILES.get(self.file_field)
        return upload_file(file, self.upload_folder) if file else None

    def get(self, request, pk=None):
        return success_response('About Us retrieved', self._payload(HomePage.load()))

    def post(self, request, pk=None):
        serializer = AboutUsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        homepage = HomePage.load()
        homepage.about_title       = data.get('about_title') or homepage.about_title or ABOUT_US_DEFAULT_TITLE
        homepage.about_description = data.get('about_description') or homepage.about_description
        homepage.about_image       = (
            self._uploaded_image(request) or data.get('about_image') or homepage.about_image
        )
        homepage.save()

        logger.info('About Us filled in by admin %s', request.user.pk)
        return success_response('About Us added', self._payload(homepage))

    def put(self, request, pk=None):
        homepage = HomePage.load()
        serializer = AboutUsSerializer(homepage, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        for field, value in serializer.validated_data.items():
            setattr(homepage, field, value)
        image = self._uploaded_image(request)
        if image:
            homepage.about_image = image
        homepage.save()

        logger.info('About Us updated by admin %s', request.user.pk)
        return success_response('About Us updated', self._payload(homepage))

    def delete(self, request, pk=None):
        homepage = HomePage.load()
        homepage.reset_about_us()
        homepage.save()

        logger.info('About Us reset by admin %s', request.user.pk)
        return success_response('About Us deleted', self._payload(homepage))
