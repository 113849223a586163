"""
Serializers for Product API endpoints.
"""

from decimal import Decimal

from rest_framework import serializers

MAX_PRICE = Decimal("1000.00")


class ProductRequestSerializer(serializers.Serializer):
    """Serializer for create and update product requests."""

    name = serializers.CharField(required=True, allow_blank=False, max_length=100)
    brand_name = serializers.CharField(required=True, allow_blank=False, max_length=100)
    price = serializers.DecimalField(
        required=True,
        max_digits=6,
        decimal_places=2,
        max_value=MAX_PRICE,
    )

    def validate_price(self, value: Decimal) -> Decimal:
        """Price must be strictly positive."""
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than 0.")
        return value


class ProductResponseSerializer(serializers.Serializer):
    """Serializer for a product in responses."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    brand_name = serializers.CharField()
    price = serializers.DecimalField(max_digits=6, decimal_places=2)


class ProductEnvelopeSerializer(serializers.Serializer):
    """Response body carrying one product."""

    product = ProductResponseSerializer()


class ProductListEnvelopeSerializer(serializers.Serializer):
    """Response body carrying a list of products."""

    products = ProductResponseSerializer(many=True)


class DeleteResultSerializer(serializers.Serializer):
    """Response body for a delete request."""

    result = serializers.CharField()
