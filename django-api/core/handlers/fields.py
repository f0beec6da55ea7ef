from rest_framework import serializers


def money_field(source: str | None = None, **options) -> serializers.DecimalField:
    """Two-decimal amount rendered as a JSON number.

    No digit cap: sums of bounded amounts may outgrow a single one.
    """
    if source:
        options["source"] = source
    return serializers.DecimalField(
        max_digits=None, decimal_places=2, coerce_to_string=False, **options
    )
