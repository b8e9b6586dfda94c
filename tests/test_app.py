"""Smoke tests for the Streamlit page."""
import pytest
from streamlit.testing.v1 import AppTest


@pytest.fixture
def app(repo_root):
    at = AppTest.from_file(str(repo_root / "app.py"), default_timeout=60)
    at.run()
    return at


class TestStreamlitApp:
    def test_renders_without_exception(self, app):
        assert not app.exception
        assert not app.error

    def test_default_output(self, app):
        assert app.code[0].value == "KHOOR ZRUOG"

    def test_decrypt_mode(self, app):
        app.text_area(key="input_text").set_value("KHOOR ZRUOG")
        app.radio(key="mode").set_value("Decrypt")
        app.run()
        assert app.code[0].value == "HELLO WORLD"

    def test_shift_slider(self, app):
        app.slider(key="shift").set_value(1)
        app.run()
        assert app.code[0].value == "IFMMP XPSME"
