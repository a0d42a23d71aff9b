"""Measurement file readers."""

from vna_timedomain.dataio.measurement import (
    S21Measurement,
    load_s21_measurement,
    measurement_from_columns,
)

__all__ = ["S21Measurement", "load_s21_measurement", "measurement_from_columns"]
