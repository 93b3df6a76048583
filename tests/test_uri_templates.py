#!/usr/bin/env python3
"""
Tests for URI template expansion used to build server URLs.
"""

import pytest

from jasperclient.rest_client import encode_path, encode_template_value, expand_uri_template


def test_values_expand_in_order_of_appearance():
    url = expand_uri_template("/reports/{uuid}?file={name}", "abc-123", "img_0_0_0")
    assert url == "/reports/abc-123?file=img_0_0_0"


def test_none_expands_to_empty_and_booleans_to_lowercase():
    url = expand_uri_template("?q={query}&recursive={recursive}&limit={limit}", None, True, 0)
    assert url == "?q=&recursive=true&limit=0"

    assert encode_template_value(False) == "false"


def test_values_are_percent_encoded():
    assert encode_template_value("Sales & Marketing") == "Sales%20%26%20Marketing"
    assert encode_template_value("a=b") == "a%3Db"
    # folder separators are kept readable
    assert encode_template_value("/reports/samples") == "/reports/samples"


def test_missing_values_raise():
    with pytest.raises(ValueError, match="name"):
        expand_uri_template("/{uuid}?file={name}", "only-one")


def test_encode_path():
    assert encode_path("/reports/All Accounts") == "/reports/All%20Accounts"
    assert encode_path(None) == ""
