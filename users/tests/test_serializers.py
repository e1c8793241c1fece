from django.contrib.auth import get_user_model
from django.test import TestCase

from users.models import Role
from users.serializers import PASSWORD_RULES, RegisterSerializer, UserSerializer

User = get_user_model()


class RegisterSerializerTest(TestCase):
    """Test the registration schema."""

    def setUp(self):
        self.valid_data = {
            'full_name': 'Jane Doe',
            'email': 'jane@example.com',
            'password': 'Secret123!',
        }

    def test_valid_data(self):
        serializer = RegisterSerializer(data=self.valid_data)
        self.assertTrue(serializer.is_valid(), serializer.errors)

    def test_collects_every_missing_field(self):
        serializer = RegisterSerializer(data={})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(set(serializer.errors), {'full_name', 'email', 'password'})
        self.assertEqual(serializer.errors['full_name'][0], 'Full name is required')
        self.assertEqual(serializer.errors['email'][0], 'Email is required')
        self.assertEqual(serializer.errors['password'][0], 'Password is required')

    def test_full_name_length(self):
        serializer = RegisterSerializer(data={**self.valid_data, 'full_name': 'Jo'})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors['full_name'][0], 'Full name must be at least 3 characters long')

        serializer = RegisterSerializer(data={**self.valid_data, 'full_name': 'J' * 51})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors['full_name'][0], 'Full name cannot be more than 50 characters long')

    def test_email_format_and_length(self):
        serializer = RegisterSerializer(data={**self.valid_data, 'email': 'not-an-email'})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors['email'][0], 'Invalid email format')

        long_email = 'a' * 25 + '@example.com'
        serializer = RegisterSerializer(data={**self.valid_data, 'email': long_email})
        self.assertFalse(serializer.is_valid())
        self.assertIn('Email cannot be more than 30 characters long', serializer.errors['email'])

    def test_password_pattern(self):
        weak_passwords = [
            'Sh1!aaa',                   # too short
            'alllowercase1!',            # no uppercase
            'ALLUPPERCASE1!',            # no lowercase
            'NoDigitsHere!',             # no digit
            'NoSymbols123',              # no symbol
        ]
        for password in weak_passwords:
            serializer = RegisterSerializer(data={**self.valid_data, 'password': password})
            self.assertFalse(serializer.is_valid(), password)
            self.assertEqual(serializer.errors['password'][0], PASSWORD_RULES)

    def test_role_must_be_known(self):
        serializer = RegisterSerializer(data={**self.valid_data, 'role': 'superuser'})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors['role'][0], 'Role must be either user or admin')

    def test_duplicate_email_rejected(self):
        User.objects.create_user(email='jane@example.com', password='x', full_name='Jane')
        serializer = RegisterSerializer(data={**self.valid_data, 'email': 'JANE@example.com'})
        self.assertFalse(serializer.is_valid())
        self.assertIn('email', serializer.errors)

    def test_create_defaults_to_user_role(self):
        serializer = RegisterSerializer(data=self.valid_data)
        self.assertTrue(serializer.is_valid())
        user = serializer.save()
        self.assertEqual(user.role, Role.USER)
        self.assertTrue(user.check_password('Secret123!'))

    def test_create_with_admin_role(self):
        serializer = RegisterSerializer(data={**self.valid_data, 'role': 'admin'})
        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.save().role, Role.ADMIN)


class UserSerializerTest(TestCase):

    def test_password_never_serialized(self):
        user = User.objects.create_user(email='a@example.com', password='x', full_name='Abc')
        data = UserSerializer(user).data
        self.assertNotIn('password', data)
        self.assertIsNone(data['profile'])
        self.assertFalse(data['is_profile_complete'])
