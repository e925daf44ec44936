"""Tests for distance units and country inference"""

import logging
import math

import pytest

from services.location import (
    Distance,
    convert_distance_for_display,
    convert_distance_for_storage,
    extract_country_from_address,
    get_distance_options,
    get_distance_unit,
    get_service_radius_options,
    is_metric_country,
    km_to_miles,
    miles_to_km,
)


class TestMetricCountries:
    @pytest.mark.parametrize("code", ["GB", "gb", "Gb", "UK", "CA", "ca", "AU"])
    def test_metric(self, code):
        assert is_metric_country(code) is True

    @pytest.mark.parametrize("code", [None, "", "US", "us", "FR", "NZ", "IE"])
    def test_imperial(self, code):
        assert is_metric_country(code) is False

    def test_unit_label(self):
        assert get_distance_unit("GB") == "km"
        assert get_distance_unit("US") == "miles"
        assert get_distance_unit() == "miles"


class TestConversions:
    def test_zero(self):
        assert miles_to_km(0) == 0
        assert km_to_miles(0) == 0

    def test_whole_number_results(self):
        assert miles_to_km(10) == 16
        assert miles_to_km(50) == 80
        assert km_to_miles(16) == 10
        assert km_to_miles(80) == 50
        assert isinstance(miles_to_km(2.7), int)

    def test_lossy(self):
        # 1 mile is 1.6 km, which rounds to 2 km, which is 1.24 miles
        assert miles_to_km(1) == 2
        assert km_to_miles(miles_to_km(1.4)) != 1.4

    @pytest.mark.parametrize("miles", range(0, 201))
    def test_display_storage_round_trip_is_bounded(self, miles):
        display = convert_distance_for_display(miles, "GB")
        assert abs(convert_distance_for_storage(display, "GB") - miles) <= 1

    @pytest.mark.parametrize("code", [None, "US", "FR"])
    def test_identity_for_imperial(self, code):
        assert convert_distance_for_display(12.5, code) == 12.5
        assert convert_distance_for_storage(12.5, code) == 12.5

    def test_metric_display_and_storage(self):
        assert convert_distance_for_display(25, "CA") == 40
        assert convert_distance_for_storage(40, "au") == 25


class TestOptions:
    def test_distance_options_imperial(self):
        options = get_distance_options("US")
        assert [o.value for o in options] == [5, 10, 25, 50]
        assert options[0].label == "5 miles"

    def test_distance_options_metric(self):
        options = get_distance_options("GB")
        assert [o.value for o in options] == [8, 16, 40, 80]
        assert options[-1].label == "80 km"

    def test_service_radius_options_imperial(self):
        options = get_service_radius_options()
        assert [o.value for o in options] == list(range(5, 55, 5))
        assert all(o.label == f"{o.value} miles" for o in options)

    def test_service_radius_options_metric(self):
        options = get_service_radius_options("AU")
        assert [o.value for o in options] == list(range(8, 88, 8))
        assert all(o.label == f"{o.value} km" for o in options)


class TestExtractCountry:
    @pytest.mark.parametrize(
        "address,expected",
        [
            ("221B Baker Street, London, England", "GB"),
            ("1 Princes Street, Edinburgh, Scotland", "GB"),
            ("10 Downing Street, London SW1A 2AA, UK", "GB"),
            ("Flat 2, 5 High Street, Cardiff CF10 1AA UK", "GB"),
            ("Belfast BT1, Northern Ireland", "GB"),
            ("100 Queen St W, Toronto, ON M5H 2N2, Canada", "CA"),
            ("24 Sussex Drive, Ottawa ON CA", "CA"),
            ("Bennelong Point, Sydney NSW 2000, Australia", "AU"),
            ("1 Collins St, Melbourne VIC 3000, AU", "AU"),
            ("500 Main St, Springfield, IL", "US"),
            ("1600 Pennsylvania Ave NW, Washington, DC", "US"),
        ],
    )
    def test_addresses(self, address, expected):
        assert extract_country_from_address(address) == expected

    @pytest.mark.parametrize("address", [None, ""])
    def test_missing_address_defaults_to_us(self, address):
        assert extract_country_from_address(address) == "US"

    def test_coincidental_substring_is_misread(self):
        # Known weakness of the substring heuristic
        assert extract_country_from_address("12 Uk Lane, Springfield, IL") == "GB"

    def test_ambiguous_address_prefers_uk_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="services.location.units"):
            country = extract_country_from_address("Canada House, Trafalgar Square, London, England")

        assert country == "GB"
        assert "several countries" in caplog.text


class TestDistanceValue:
    def test_defaults_to_miles(self):
        assert Distance(value=10).unit == "mi"

    def test_to_km_and_back(self):
        km = Distance(value=10, unit="mi").to_km()
        assert km == Distance(value=16, unit="km")
        assert km.to_miles() == Distance(value=10, unit="mi")

    def test_same_unit_is_unchanged(self):
        d = Distance(value=3.3, unit="mi")
        assert d.to_miles() is d

    def test_for_country(self):
        d = Distance(value=25, unit="mi")
        assert d.for_country("GB") == Distance(value=40, unit="km")
        assert d.for_country("US") == d
        assert d.for_country() == d

    def test_rejects_unknown_unit(self):
        with pytest.raises(ValueError):
            Distance(value=1, unit="furlong")


class TestNonFinite:
    def test_infinity_converts_to_infinity(self):
        assert miles_to_km(math.inf) == math.inf
        assert km_to_miles(-math.inf) == -math.inf

    def test_nan_stays_nan(self):
        assert math.isnan(miles_to_km(math.nan))
        assert math.isnan(km_to_miles(math.nan))

    def test_display_and_storage(self):
        assert convert_distance_for_display(math.inf, "GB") == math.inf
        assert math.isnan(convert_distance_for_storage(math.nan, "GB"))
