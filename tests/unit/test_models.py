import dataclasses

import pytest

import detabase
from detabase import Options
from detabase.models import JSONArray, JSONObject, JSONPrimitive, JSONValue


class TestOptions:
    def test_base_url(self) -> None:
        options = Options(project_id="proj", base_name="base", api_key="key")

        assert options.base_url == "https://database.deta.sh/v1/proj/base/"

    def test_frozen(self) -> None:
        options = Options(project_id="proj", base_name="base", api_key="key")

        with pytest.raises(dataclasses.FrozenInstanceError):
            options.api_key = "other"  # type: ignore[misc]


class TestJSONTypes:
    def test_aliases_are_public(self) -> None:
        for name in ("Item", "JSONArray", "JSONObject", "JSONPrimitive", "JSONValue"):
            assert name in detabase.__all__
            assert hasattr(detabase, name)

    def test_value_alias_is_recursive(self) -> None:
        assert JSONValue == "JSONPrimitive | JSONArray | JSONObject"
        assert JSONArray == "list[JSONValue]"
        assert JSONObject == "dict[str, JSONValue]"
        assert "None" in JSONPrimitive
