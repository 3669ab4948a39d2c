"""
Serializer fields for contact values.
"""
from rest_framework import serializers


class ContactStringField(serializers.CharField):
    """
    CharField that accepts only real strings.

    DRF's CharField coerces numbers to text; contact values must arrive as
    strings and are kept exactly as sent, blanks and whitespace included.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        kwargs.setdefault('allow_blank', True)
        kwargs.setdefault('trim_whitespace', False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)
