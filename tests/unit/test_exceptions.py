import pytest

from seatproxy.exceptions import (
    AuthenticationError,
    ConfigurationError,
    EnrichmentError,
    SeatParseError,
    SeatProxyError,
    UpstreamFetchError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [ConfigurationError, AuthenticationError, SeatParseError, EnrichmentError],
    )
    def test_all_derive_from_base(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, SeatProxyError)

    def test_status_codes(self) -> None:
        assert ConfigurationError("x").status_code == 400
        assert AuthenticationError("x").status_code == 401
        assert SeatParseError("x").status_code == 500

    def test_upstream_mirrors_status(self) -> None:
        assert UpstreamFetchError("x", status_code=404).status_code == 404

    def test_upstream_defaults_to_500(self) -> None:
        err = UpstreamFetchError("Error fetching seats data. Error: boom")
        assert err.status_code == 500
        assert str(err) == "Error fetching seats data. Error: boom"
