import re

from healthapp.core import identity


def test_new_id_is_unique():
    ids = {identity.new_id() for _ in range(5000)}
    assert len(ids) == 5000


def test_now_is_iso_utc_with_milliseconds():
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", identity.now())
