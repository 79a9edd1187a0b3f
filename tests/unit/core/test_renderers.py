"""Unit tests for the text/plain and text/csv export renderers."""

from __future__ import annotations

import json

import pytest
from rest_framework.renderers import JSONRenderer

from modules.core.renderers import CSVRenderer, PlainTextRenderer

pytestmark = pytest.mark.unit

ERROR_BODY = {
    "type": "client_error",
    "errors": [{"code": "not_found", "detail": "Cliente não encontrado.", "attr": None}],
}


@pytest.mark.parametrize("renderer_class", [PlainTextRenderer, CSVRenderer])
class TestTextRenderers:
    def test_string_passes_through(self, renderer_class):
        assert renderer_class().render("id;nome\n1;\"Ana\"\n") == b'id;nome\n1;"Ana"\n'

    def test_none_renders_empty_body(self, renderer_class):
        assert renderer_class().render(None) == b""

    def test_error_dict_encoded_like_json_responses(self, renderer_class):
        rendered = renderer_class().render(ERROR_BODY)
        assert rendered == JSONRenderer().render(ERROR_BODY)
        assert json.loads(rendered) == ERROR_BODY
        assert "não encontrado".encode() in rendered
