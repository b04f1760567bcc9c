"""
Tests for HTTP health checks — defaults, validation, immutability.
"""

import pytest
from pydantic import ValidationError

from archmodel.core.models import HttpHealthCheck, InvalidArgumentError
from archmodel.core.models.validation import is_url


class TestHttpHealthCheck:
    """HttpHealthCheck construction and validation."""

    def test_defaults(self):
        """Interval defaults to 60 seconds, timeout to 0."""
        hc = HttpHealthCheck.create("Ping", "http://localhost:8080")
        assert hc.interval == 60
        assert hc.timeout == 0
        assert hc.headers == {}

    def test_values_stored_as_given(self):
        hc = HttpHealthCheck.create("Ping", "http://localhost:8080", 0, 0)
        assert hc.url == "http://localhost:8080"
        assert hc.interval == 0

    def test_headers(self):
        """Extra request headers are kept."""
        hc = HttpHealthCheck.create(
            "Ping", "https://localhost", headers={"Authorization": "Bearer x"}
        )
        assert hc.headers == {"Authorization": "Bearer x"}

    def test_is_frozen(self):
        """A health check can't be changed after creation."""
        hc = HttpHealthCheck.create("Ping", "https://localhost")
        with pytest.raises(ValidationError):
            hc.interval = 5

    def test_first_invalid_field_wins(self):
        """Name is checked first."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            HttpHealthCheck.create(" ", "localhost", -1, -1)
        assert str(exc_info.value) == "The name must not be null or empty."

    def test_url_checked_before_interval(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            HttpHealthCheck.create("Ping", "localhost", -1, 0)
        assert str(exc_info.value) == "localhost is not a valid URL."

    def test_non_integer_interval(self):
        """A non-numeric interval is rejected with the interval message."""
        with pytest.raises(InvalidArgumentError, match="interval"):
            HttpHealthCheck.create("Ping", "https://localhost", "often", 0)

    @pytest.mark.parametrize("interval", [True, "60", 1.5, 60.0, None])
    def test_interval_must_be_a_real_int(self, interval):
        """No coercion from bool, str or float."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            HttpHealthCheck.create("Ping", "https://localhost", interval, 0)
        assert str(exc_info.value) == "The polling interval must be zero or a positive integer."

    @pytest.mark.parametrize("timeout", [True, False, "0", 1.5])
    def test_timeout_must_be_a_real_int(self, timeout):
        with pytest.raises(InvalidArgumentError) as exc_info:
            HttpHealthCheck.create("Ping", "https://localhost", 60, timeout)
        assert str(exc_info.value) == "The timeout must be zero or a positive integer."

    def test_direct_construction_validates(self):
        """Validators also run when the model is built directly."""
        with pytest.raises(ValidationError, match="The timeout must be zero or a positive integer"):
            HttpHealthCheck(name="Ping", url="https://localhost", timeout=-5)

    def test_to_dict(self):
        hc = HttpHealthCheck.create("Ping", "https://localhost", 30, 5)
        assert hc.to_dict() == {
            "name": "Ping",
            "url": "https://localhost",
            "interval": 30,
            "timeout": 5,
            "headers": {},
        }


class TestIsUrl:
    """URL syntax check."""

    @pytest.mark.parametrize(
        "url",
        ["http://localhost:8080", "https://localhost", "https://example.com/health?x=1"],
    )
    def test_valid(self, url):
        """Absolute URLs with a scheme and host pass."""
        assert is_url(url)

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "  ",
            "localhost",
            "/health",
            "example.com",
            "localhost:8080",
            "example.com:443",
            "foo:bar",
        ],
    )
    def test_invalid(self, url):
        """Blank values, bare hosts, host:port and relative paths fail."""
        assert not is_url(url)

    def test_invalid_host_port_message(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            HttpHealthCheck.create("Ping", "localhost:8080")
        assert str(exc_info.value) == "localhost:8080 is not a valid URL."
