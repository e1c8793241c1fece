from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .forms  import AccountChangeForm, AccountCreationForm
from .models import User, Profile


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'Profile'
    fk_name = 'user'


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = AccountChangeForm
    add_form = AccountCreationForm
    inlines = (ProfileInline,)
    ordering = ('-date_joined',)
    list_display = ('email', 'full_name', 'role', 'is_blocked', 'is_profile_complete', 'date_joined')
    list_filter = ('role', 'is_blocked', 'is_profile_complete')
    search_fields = ('email', 'full_name')
    fieldsets = (
        (None,          {'fields': ('email', 'password')}),
        ('Account',     {'fields': ('full_name', 'role', 'is_blocked', 'is_profile_complete')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Dates',       {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'full_name', 'role', 'password1', 'password2'),
        }),
    )


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'profession', 'years_of_experience', 'updated_at')
    search_fields = ('user__email', 'user__full_name', 'profession')
