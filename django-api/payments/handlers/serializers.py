"""Serializers for transforming payments domain models to API responses."""

from rest_framework import serializers

from core.handlers.fields import money_field


class PaymentKeySerializer(serializers.Serializer):
    """Serializer for PaymentKey domain model."""

    id = serializers.CharField()
    key = serializers.CharField()
    type = serializers.CharField(source="kind.value")
    name = serializers.CharField()
    active = serializers.BooleanField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class PixAssignmentSerializer(serializers.Serializer):
    """What a buyer needs to pay: never the key ID."""

    key = serializers.CharField()
    type = serializers.CharField(source="kind.value")
    name = serializers.CharField()
    qrcode = serializers.CharField(source="key")


class LineItemSerializer(serializers.Serializer):
    title = serializers.CharField()
    unitPrice = money_field("unit_price.amount", allow_null=True)
    quantity = serializers.IntegerField()


class CustomerSummarySerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()


class OrderCreatedSerializer(serializers.Serializer):
    id = serializers.CharField()
    code = serializers.CharField()
    status = serializers.CharField(source="status.value")
    expiresAt = serializers.DateTimeField(source="expires_at")


class OrderConfirmationSerializer(serializers.Serializer):
    id = serializers.CharField()
    code = serializers.CharField()
    status = serializers.CharField(source="status.value")
    paidAt = serializers.DateTimeField(source="paid_at", allow_null=True)


class OrderDetailSerializer(serializers.Serializer):
    """Read view of an order; customer documents are left out."""

    id = serializers.CharField()
    code = serializers.CharField()
    status = serializers.CharField(source="status.value")
    total = money_field("total.amount")
    customer = CustomerSummarySerializer()
    items = LineItemSerializer(many=True)
    createdAt = serializers.DateTimeField(source="created_at")
    expiresAt = serializers.DateTimeField(source="expires_at")
    paidAt = serializers.DateTimeField(source="paid_at", allow_null=True)


class OrderSummarySerializer(serializers.Serializer):
    """Row of the administrative order listing."""

    id = serializers.CharField()
    code = serializers.CharField()
    customer = serializers.CharField(source="customer.name")
    email = serializers.CharField(source="customer.email")
    total = money_field("total.amount")
    status = serializers.CharField(source="status.value")
    createdAt = serializers.DateTimeField(source="created_at")


class PaymentCreatedSerializer(serializers.Serializer):
    """Client view of a new order: summary plus payment instruction."""

    order = OrderCreatedSerializer(source="*")
    pix = PixAssignmentSerializer(source="payment_key")
    total = money_field("total.amount")
