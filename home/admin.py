from django.contrib import admin
from .models import HomePage, CarouselImage, Category, Testimonial


class CarouselImageInline(admin.TabularInline):
    model = CarouselImage
    extra = 0


class CategoryInline(admin.TabularInline):
    model = Category
    extra = 0


class TestimonialInline(admin.TabularInline):
    model = Testimonial
    extra = 0


@admin.register(HomePage)
class HomePageAdmin(admin.ModelAdmin):
    list_display = ('about_title', 'updated_at')
    inlines = [CarouselImageInline, CategoryInline, TestimonialInline]

    def has_add_permission(self, request):
        return False  # the singleton is created on first access
