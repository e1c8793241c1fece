from django.urls import path
from .views import (
    HomePageView,
    CarouselListView,
    CarouselDetailView,
    CategoryListView,
    CategoryDetailView,
    TestimonialListView,
    TestimonialDetailView,
    AboutUsView,
)

urlpatterns = [
    path('homepage/',                          HomePageView.as_view(),          name='homepage'),

    path('homepage/carousel/',                 CarouselListView.as_view(),      name='carousel_list'),
    path('homepage/carousel/<uuid:pk>/',       CarouselDetailView.as_view(),    name='carousel_detail'),

    path('homepage/category/',                 CategoryListView.as_view(),      name='category_list'),
    path('homepage/category/<uuid:pk>/',       CategoryDetailView.as_view(),    name='category_detail'),

    path('homepage/testimonial/',              TestimonialListView.as_view(),   name='testimonial_list'),
    path('homepage/testimonial/<uuid:pk>/',    TestimonialDetailView.as_view(), name='testimonial_detail'),

    path('homepage/aboutus/',                  AboutUsView.as_view(),           name='aboutus'),
    path('homepage/aboutus/<str:pk>/',         AboutUsView.as_view(),           name='aboutus_detail'),
]
