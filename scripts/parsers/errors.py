"""Per-record exceptions raised while decoding quartet VCF records.

Callers catch :class:`VCFRecordError` to skip a record and keep streaming.
"""


class VCFRecordError(Exception):
    """Base class for records that cannot be turned into a variant site."""

    pass


class InvalidVCFLineError(VCFRecordError):
    """The record as a whole is unusable (wrong sample count, multiallelic...)."""

    def __init__(self, message: str, record: str):
        super().__init__(message)
        self.record = record


class FilteredVCFLineError(VCFRecordError):
    """The record was rejected by a filter."""

    def __init__(self, filter_name: str, filtered_value: str):
        super().__init__(
            f"Record rejected by filter '{filter_name}' (value: {filtered_value})"
        )
        self.filter_name = filter_name
        self.filtered_value = filtered_value


class InvalidVCFFieldError(VCFRecordError):
    """A field of the record holds an invalid value."""

    def __init__(self, message: str, field_name: str, field_value: str):
        super().__init__(f"{message} ({field_name}: {field_value})")
        self.field_name = field_name
        self.field_value = field_value


class PartiallyCalledVariantError(VCFRecordError):
    """A family member's genotype has a missing allele (e.g. ``./1``)."""

    def __init__(self, genotype_field: str):
        super().__init__(f"The genotype of the variant is partially called: {genotype_field}")
        self.genotype_field = genotype_field
