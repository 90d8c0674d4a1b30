"""
Tests for the Streamlit app: dataset dispatch, the Raw Data full load and
the error panel with its Try Again button.
"""

import pytest
from streamlit.testing.v1 import AppTest

from overlook.api.api_client import ApiClient, TransportError


class FakeApi:
    """Stands in for ApiClient.fetch_list, recording every endpoint fetched."""

    def __init__(self):
        self.calls = []
        self.failing = False

    def fetch_list(self, client, endpoint):
        self.calls.append(endpoint)
        if self.failing:
            raise TransportError(500, "Internal Server Error", "database offline")
        if endpoint == "/weather":
            return [
                {"MinTemp": 10.0, "MaxTemp": 20.0 + i, "Rainfall": 0.0,
                 "WindSpeed3pm": 12.0, "RainToday": "No", "RainTomorrow": "Yes"}
                for i in range(150)
            ]
        if endpoint == "/flights":
            return [
                {"FL_DATE": "2006-01-01", "DEP_DELAY": 5, "ARR_DELAY": 40,
                 "AIR_TIME": 60, "DISTANCE": 400, "DEP_TIME": "9:05", "ARR_TIME": "10:45"}
                for _ in range(30)
            ]
        return []


@pytest.fixture
def api(monkeypatch):
    fake = FakeApi()
    monkeypatch.setattr(
        ApiClient, "fetch_list", lambda client, endpoint: fake.fetch_list(client, endpoint)
    )
    return fake


@pytest.fixture
def app(api):
    at = AppTest.from_file("../streamlit_app.py", default_timeout=30)
    at.secrets["API_BASE_URL"] = "http://api.test/api"
    at.run()
    assert not at.exception
    return at


def weather_view(at):
    return at.session_state["dashboard"].views["weather"]


class TestDispatch:
    def test_weather_loaded_on_start(self, app, api):
        view = weather_view(app)

        assert api.calls == ["/weather"]
        assert len(view.rows) == 20
        assert app.radio(key="weather_subtab").value == "Overview"
        assert len(app.metric) == 4

    def test_selecting_dataset_loads_it(self, app, api):
        app.radio(key="dataset").set_value("flights").run()

        assert not app.exception
        dashboard = app.session_state["dashboard"]
        assert dashboard.active_key == "flights"
        assert len(dashboard.views["flights"].rows) == 20
        assert api.calls == ["/weather", "/flights"]
        assert app.radio(key="flights_subtab").value == "Overview"


class TestRawDataTab:
    def test_full_data_loaded_once(self, app, api):
        app.radio(key="weather_subtab").set_value("Raw Data").run()

        view = weather_view(app)
        assert view.full_data_loaded is True
        assert len(view.rows) == 100
        assert api.calls == ["/weather", "/weather"]

        app.run()

        assert api.calls == ["/weather", "/weather"]
        assert len(app.dataframe) == 1

    def test_failed_full_load_shows_error(self, app, api):
        api.failing = True

        app.radio(key="weather_subtab").set_value("Raw Data").run()

        view = weather_view(app)
        assert view.status.value == "error"
        assert len(app.error) == 1
        assert "API error: 500 Internal Server Error - database offline" in app.error[0].value
        assert len(view.rows) == 20
        assert app.button(key="weather_retry").label == "Try Again"

    def test_try_again_reloads_full_page(self, app, api):
        api.failing = True
        app.radio(key="weather_subtab").set_value("Raw Data").run()
        api.failing = False

        app.button(key="weather_retry").click().run()

        view = weather_view(app)
        assert view.status.value == "ready"
        assert view.limit == 100
        assert len(view.rows) == 100
        assert view.full_data_loaded is True
        assert len(app.error) == 0
        assert api.calls == ["/weather", "/weather", "/weather"]
