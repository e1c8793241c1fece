from rest_framework import serializers

from .models import CarouselImage, Category, HomePage, Testimonial


class CarouselImageSerializer(serializers.ModelSerializer):
    class Meta:
        model  = CarouselImage
        fields = ('id', 'title', 'description', 'image')
        extra_kwargs = {'image': {'required': False}}


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model  = Category
        fields = ('id', 'title', 'description', 'image')
        extra_kwargs = {'image': {'required': False}}


class TestimonialSerializer(serializers.ModelSerializer):
    class Meta:
        model  = Testimonial
        fields = ('id', 'name', 'feedback', 'image')


class AboutUsSerializer(serializers.Serializer):
    """The about-us block lives on the homepage row itself."""
    title       = serializers.CharField(source='about_title', max_length=200, required=False, allow_blank=True)
    description = serializers.CharField(source='about_description', required=False, allow_blank=True)
    image       = serializers.URLField(source='about_image', max_length=500, required=False, allow_blank=True)


class HomePageSerializer(serializers.ModelSerializer):
    carousel_images = CarouselImageSerializer(many=True, read_only=True)
    categories      = CategorySerializer(many=True, read_only=True)
    testimonials    = TestimonialSerializer(many=True, read_only=True)
    about_us        = serializers.SerializerMethodField()

    class Meta:
        model  = HomePage
        fields = ('carousel_images', 'categories', 'testimonials', 'about_us', 'updated_at')

    def get_about_us(self, obj):
        return AboutUsSerializer(obj).data
