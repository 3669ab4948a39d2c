"""
Person serializers.
"""
from rest_framework import serializers

from ...domain.entities.person import Person
from .fields import ContactStringField


class PersonSerializer(serializers.Serializer):
    """Serializer for a person's office contact fields."""
    office_area_code = ContactStringField()
    office_number = ContactStringField()

    def create(self, validated_data):
        return Person(**validated_data)

    def update(self, instance, validated_data):
        instance.office_area_code = validated_data.get(
            'office_area_code', instance.office_area_code
        )
        instance.office_number = validated_data.get(
            'office_number', instance.office_number
        )
        return instance
