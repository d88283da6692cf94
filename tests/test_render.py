import json

import pytest
import yaml

from steam_openapi.openapi.render import render_document

DOC = {"openapi": "3.0.0", "info": {"title": "Steam Web API"}, "paths": {}}


class TestRenderDocument:
    def test_json_pretty_printed(self):
        text = render_document(DOC, "json")
        assert text.startswith('{\n  "openapi": "3.0.0"')
        assert json.loads(text) == DOC

    def test_yaml_keeps_key_order(self):
        text = render_document(DOC, "yaml")
        assert text.splitlines()[0] == "openapi: 3.0.0"
        assert yaml.safe_load(text) == DOC

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            render_document(DOC, "xml")
