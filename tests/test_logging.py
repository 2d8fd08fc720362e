"""
Tests for the log line context formatter.
"""

from __future__ import annotations

import logging

from storefront.main import ContextFormatter


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("storefront", logging.ERROR, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_adapter_failures_name_table_and_method():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    line = formatter.format(_record("Supabase request failed", table="orders", method="PATCH", status=500))
    assert line == "ERROR:storefront:Supabase request failed | table=orders method=PATCH status=500"


def test_content_and_email_ids_are_kept():
    formatter = ContextFormatter("%(message)s")
    assert formatter.format(_record("Content updated", content_id="7")) == "Content updated | content_id=7"
    assert formatter.format(_record("Order email sent", email_id="em_1")) == "Order email sent | email_id=em_1"


def test_plain_record_has_no_suffix():
    assert ContextFormatter("%(message)s").format(_record("Checkout started")) == "Checkout started"
