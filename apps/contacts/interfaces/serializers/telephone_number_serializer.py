"""
Telephone number serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.telephone_number import TelephoneNumber
from .fields import ContactStringField


class TelephoneNumberSerializer(serializers.Serializer):
    """Serializer for telephone numbers. Values pass through unchanged."""
    area_code = ContactStringField()
    number = ContactStringField()

    def create(self, validated_data):
        return TelephoneNumber(**validated_data)

    def update(self, instance, validated_data):
        instance.area_code = validated_data.get('area_code', instance.area_code)
        instance.number = validated_data.get('number', instance.number)
        return instance
