import pytest

from tests.fakes import RecordingSleep, make_image


@pytest.fixture
def png_bytes():
    return make_image("PNG")


@pytest.fixture
def webp_bytes():
    return make_image("WEBP")


@pytest.fixture
def jpeg_bytes():
    return make_image("JPEG")


@pytest.fixture
def recording_sleep():
    return RecordingSleep()
