from unittest import mock

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from projects.models import Project
from users.models import Profile

User = get_user_model()


class ModerationTestCase(APITestCase):

    def setUp(self):
        self.admin = User.objects.create_superuser(
            email='admin@example.com',
            password='AdminPass123!',
            full_name='Site Admin',
        )
        self.user = User.objects.create_user(
            email='user@example.com',
            password='UserPass123!',
            full_name='Regular User',
        )


class AdminGateTest(ModerationTestCase):
    """Admin-only routes reject anonymous callers with 401 and members with 403."""

    def admin_only_requests(self):
        return [
            ('get',    reverse('admin_user_list')),
            ('get',    reverse('admin_dashboard')),
            ('put',    reverse('admin_block_user', kwargs={'user_id': self.user.pk})),
            ('put',    reverse('admin_unblock_user', kwargs={'user_id': self.user.pk})),
            ('delete', reverse('admin_delete_user', kwargs={'user_id': self.user.pk})),
        ]

    def test_anonymous_gets_401(self):
        for method, url in self.admin_only_requests():
            response = getattr(self.client, method)(url)
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, url)
            self.assertFalse(response.data['success'])

    def test_member_gets_403(self):
        self.client.force_authenticate(user=self.user)
        for method, url in self.admin_only_requests():
            response = getattr(self.client, method)(url)
            self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, url)

        self.assertTrue(User.objects.filter(pk=self.user.pk).exists())
        self.user.refresh_from_db()
        self.assertFalse(self.user.is_blocked)


class UserListAndDetailTest(ModerationTestCase):

    def test_list_users(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.get(reverse('admin_user_list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['count'], 2)
        for user in response.data['data']['users']:
            self.assertNotIn('password', user)

    def test_user_detail_is_public(self):
        response = self.client.get(reverse('admin_user_detail', kwargs={'user_id': self.user.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['user']['email'], 'user@example.com')

    def test_user_detail_not_found(self):
        response = self.client.get(reverse('admin_user_detail', kwargs={'user_id': 9999}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'User not found')


class BlockUserViewTest(ModerationTestCase):

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(user=self.admin)

    def test_block_and_unblock(self):
        response = self.client.put(reverse('admin_block_user', kwargs={'user_id': self.user.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['data']['user']['is_blocked'])
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_blocked)

        response = self.client.put(reverse('admin_unblock_user', kwargs={'user_id': self.user.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertFalse(self.user.is_blocked)

    def test_cannot_block_admin(self):
        other_admin = User.objects.create_superuser(
            email='boss@example.com', password='AdminPass123!', full_name='Other Admin'
        )
        response = self.client.put(reverse('admin_block_user', kwargs={'user_id': other_admin.pk}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Cannot block admin users')
        other_admin.refresh_from_db()
        self.assertFalse(other_admin.is_blocked)

    def test_block_unknown_user(self):
        response = self.client.put(reverse('admin_block_user', kwargs={'user_id': 9999}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_blocked_user_cannot_login(self):
        self.client.put(reverse('admin_block_user', kwargs={'user_id': self.user.pk}))
        self.client.force_authenticate(user=None)
        response = self.client.post(
            reverse('login'), {'email': 'user@example.com', 'password': 'UserPass123!'}
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class DeleteUserViewTest(ModerationTestCase):

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(user=self.admin)

    def test_delete_removes_profile_projects_and_account(self):
        Profile.objects.create(user=self.user, profession='Backend Developer')
        project = Project.objects.create(user=self.user, title='Side project')
        user_id = self.user.pk

        response = self.client.delete(reverse('admin_delete_user', kwargs={'user_id': user_id}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'User and all associated data deleted successfully')

        self.assertFalse(User.objects.filter(pk=user_id).exists())
        self.assertFalse(Profile.objects.filter(user_id=user_id).exists())
        self.assertFalse(Project.objects.filter(user_id=user_id).exists())

        self.client.force_authenticate(user=None)
        response = self.client.get(reverse('project_detail', kwargs={'pk': project.pk}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        response = self.client.get(reverse('profile_detail', kwargs={'user_id': user_id}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_user_without_profile(self):
        response = self.client.delete(reverse('admin_delete_user', kwargs={'user_id': self.user.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(User.objects.filter(pk=self.user.pk).exists())

    def test_cannot_delete_admin(self):
        response = self.client.delete(reverse('admin_delete_user', kwargs={'user_id': self.admin.pk}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Cannot delete admin users')
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())


class DashboardViewTest(ModerationTestCase):

    def test_stats(self):
        blocked = User.objects.create_user(
            email='blocked@example.com', password='x', full_name='Blocked User', is_blocked=True
        )
        Profile.objects.create(user=self.user)
        Project.objects.create(user=self.user, title='One')
        Project.objects.create(user=blocked, title='Two')

        self.client.force_authenticate(user=self.admin)
        response = self.client.get(reverse('admin_dashboard'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['stats'], {
            'total_users':    2,
            'total_profiles': 1,
            'total_projects': 2,
            'blocked_users':  1,
        })


class ProjectModerationViewTest(ModerationTestCase):

    def setUp(self):
        super().setUp()
        self.project = Project.objects.create(
            user=self.user, title='Original', summary='Keep me', skills=['Go']
        )

    def test_member_cannot_moderate(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.put(
            reverse('admin_update_project', kwargs={'pk': self.project.pk}), {'title': 'Hijacked'}
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_partial_update(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put(
            reverse('admin_update_project', kwargs={'pk': self.project.pk}),
            {'title': 'Renamed', 'skills': 'Go, Rust'},
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Project updated successfully by admin')

        self.project.refresh_from_db()
        self.assertEqual(self.project.title, 'Renamed')
        self.assertEqual(self.project.summary, 'Keep me')
        self.assertEqual(self.project.skills, ['Go', 'Rust'])

    @mock.patch('cloudinary.uploader.upload', return_value={'secure_url': 'https://cdn.example.com/t.png'})
    def test_update_thumbnail(self, upload):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put(
            reverse('admin_update_project', kwargs={'pk': self.project.pk}),
            {'thumbnail': SimpleUploadedFile('t.png', b'png', content_type='image/png')},
            format='multipart',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.project.refresh_from_db()
        self.assertEqual(self.project.thumbnail, 'https://cdn.example.com/t.png')

    def test_update_unknown_project(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put(reverse('admin_update_project', kwargs={'pk': 9999}), {'title': 'X'})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Project not found')

    def test_delete_project(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.delete(reverse('admin_delete_project', kwargs={'pk': self.project.pk}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Project.objects.filter(pk=self.project.pk).exists())

    def test_routes_accept_only_their_own_method(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put(
            reverse('admin_delete_project', kwargs={'pk': self.project.pk}), {'title': 'Renamed'}
        )
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertFalse(response.data['success'])

        response = self.client.delete(reverse('admin_update_project', kwargs={'pk': self.project.pk}))
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

        self.project.refresh_from_db()
        self.assertEqual(self.project.title, 'Original')
