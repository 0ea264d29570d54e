from datetime import datetime

from marshmallow import EXCLUDE, Schema, post_load

from zakfit.utils.http import to_naive_utc


class BaseSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    @post_load
    def normalize_datetimes(self, data, **kwargs):
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = to_naive_utc(value)
        return data


# Largest values the INT and FLOAT columns accept on every backend.
MAX_INT = 2_147_483_647
MAX_AMOUNT = 1_000_000_000.0
