from rest_framework import serializers


class CommaSeparatedListField(serializers.Field):
    """
    Accepts "Go, Rust" (form posts) or ["Go", "Rust"] (JSON) and stores an
    ordered list of trimmed, non-empty strings.
    """
    default_error_messages = {
        'invalid': 'Expected a comma-separated string or a list of strings.',
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            items = data.split(',')
        elif isinstance(data, (list, tuple)):
            items = data
        else:
            self.fail('invalid')
        return [str(item).strip() for item in items if str(item).strip()]

    def to_representation(self, value):
        return list(value or [])
