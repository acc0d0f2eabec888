"""Tests for fragsite.errors — exception hierarchy and messages."""

import pytest

from fragsite.errors import (
    ConfigurationError,
    FragmentNotFound,
    FragsiteError,
    HTTPError,
    ManifestUnavailable,
)


class TestHierarchy:
    def test_http_error_is_fragsite_error(self) -> None:
        assert issubclass(HTTPError, FragsiteError)

    def test_fragment_not_found_is_http_error(self) -> None:
        assert issubclass(FragmentNotFound, HTTPError)

    def test_manifest_unavailable_is_not_http_error(self) -> None:
        assert issubclass(ManifestUnavailable, FragsiteError)
        assert not issubclass(ManifestUnavailable, HTTPError)

    def test_configuration_error_is_fragsite_error(self) -> None:
        assert issubclass(ConfigurationError, FragsiteError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad")) == "400: Bad"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestFragmentNotFound:
    def test_status_and_file(self) -> None:
        err = FragmentNotFound("/components/cards.html")
        assert err.status == 404
        assert err.file == "/components/cards.html"

    def test_detail_names_file(self) -> None:
        err = FragmentNotFound("/components/cards.html")
        assert err.detail.startswith("Component not found. Unable to load /components/cards.html.")
        assert "public/components/cards.html" in err.detail
