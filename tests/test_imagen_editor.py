import base64

import aiohttp
import pytest

from foodsnap.exceptions import BillingDisabledError, ConfigurationError, ProviderError
from foodsnap.models import EditMode, EditOptions, MaskMode
from foodsnap.services import imagen_editor
from foodsnap.services.imagen_editor import (
    ImagenEditProvider,
    build_edit_payload,
    default_base_steps,
    load_service_account_info,
    translate_provider_error,
)
from tests.fakes import encode_credentials, mock_session


@pytest.fixture
def provider_factory(monkeypatch):
    def factory(session):
        provider = ImagenEditProvider(credentials_b64=encode_credentials(), session=session)

        async def fake_token():
            return "token-123"

        monkeypatch.setattr(provider, "get_access_token", fake_token)
        return provider
    return factory


def test_payload_has_raw_and_mask_references():
    payload = build_edit_payload("add chopsticks", b"raw-bytes", EditOptions())
    refs = payload["instances"][0]["referenceImages"]

    assert len(refs) == 2
    raw, mask = refs
    assert raw["referenceType"] == "REFERENCE_TYPE_RAW"
    assert raw["referenceId"] == 1
    assert base64.b64decode(raw["referenceImage"]["bytesBase64Encoded"]) == b"raw-bytes"
    assert mask["referenceType"] == "REFERENCE_TYPE_MASK"
    assert mask["referenceId"] == 2
    assert mask["maskImageConfig"] == {"maskMode": "MASK_MODE_BACKGROUND", "dilation": 0.01}
    assert "referenceImage" not in mask


def test_payload_parameters():
    options = EditOptions(edit_mode=EditMode.OUTPAINT, aspect_ratio="16:9")
    params = build_edit_payload("more table", b"x", options)["parameters"]

    assert params["editMode"] == "EDIT_MODE_OUTPAINT"
    assert params["editConfig"] == {"baseSteps": 35}
    assert params["sampleCount"] == 1
    assert params["outputOptions"] == {"mimeType": "image/png"}
    assert params["aspectRatio"] == "16:9"


def test_payload_omits_aspect_ratio_when_unset():
    params = build_edit_payload("p", b"x", EditOptions())["parameters"]
    assert "aspectRatio" not in params


@pytest.mark.parametrize("mode, steps", [
    (EditMode.INPAINT_REMOVAL, 12),
    (EditMode.INPAINT_INSERTION, 35),
    (EditMode.OUTPAINT, 35),
])
def test_default_base_steps(mode, steps):
    assert default_base_steps(mode) == steps
    options = EditOptions(edit_mode=mode, mask_mode=MaskMode.SEMANTIC)
    assert build_edit_payload("p", b"x", options)["parameters"]["editConfig"]["baseSteps"] == steps


def test_explicit_base_steps_win():
    options = EditOptions(edit_mode=EditMode.INPAINT_REMOVAL, base_steps=20)
    assert build_edit_payload("p", b"x", options)["parameters"]["editConfig"]["baseSteps"] == 20


def test_credentials_validation():
    with pytest.raises(ConfigurationError):
        load_service_account_info(None)
    with pytest.raises(ConfigurationError):
        load_service_account_info("not base64 json!!")
    with pytest.raises(ConfigurationError):
        load_service_account_info(encode_credentials(private_key=""))

    assert load_service_account_info(encode_credentials())["project_id"] == "demo-project"


def test_missing_credentials_in_settings(monkeypatch):
    monkeypatch.setattr(imagen_editor.settings, "GOOGLE_VERTEX_AI_CREDENTIALS", None)
    with pytest.raises(ConfigurationError):
        ImagenEditProvider()


def test_endpoint_uses_project_region_and_model():
    provider = ImagenEditProvider(credentials_b64=encode_credentials(), region="europe-west4", model="imagen-x")
    assert provider.endpoint == (
        "https://europe-west4-aiplatform.googleapis.com/v1/projects/demo-project"
        "/locations/europe-west4/publishers/google/models/imagen-x:predict"
    )


@pytest.mark.asyncio
async def test_edit_returns_decoded_image(provider_factory):
    encoded = base64.b64encode(b"png-bytes").decode()
    session = mock_session("post", json_data={"predictions": [{"bytesBase64Encoded": encoded}]})
    provider = provider_factory(session)

    result = await provider.edit("add chopsticks", b"raw", EditOptions())

    assert result.image_bytes == b"png-bytes"
    assert result.mime_type == "image/png"
    headers = session.post.call_args[1]["headers"]
    assert headers["Authorization"] == "Bearer token-123"


@pytest.mark.asyncio
async def test_billing_disabled_is_typed(provider_factory):
    session = mock_session("post", status=403, text='{"error": {"reason": "BILLING_DISABLED"}}')
    provider = provider_factory(session)

    with pytest.raises(BillingDisabledError) as exc_info:
        await provider.edit("p", b"raw", EditOptions())
    assert exc_info.value.status == 403
    assert "billing" in exc_info.value.user_message.lower()


@pytest.mark.asyncio
async def test_other_errors_are_provider_errors(provider_factory):
    session = mock_session("post", status=400, text="INVALID_ARGUMENT: bad mask")
    provider = provider_factory(session)

    with pytest.raises(ProviderError) as exc_info:
        await provider.edit("p", b"raw", EditOptions())
    assert not isinstance(exc_info.value, BillingDisabledError)
    assert exc_info.value.status == 400
    assert exc_info.value.user_message == translate_provider_error("invalid argument")


@pytest.mark.asyncio
async def test_empty_predictions_raise(provider_factory):
    provider = provider_factory(mock_session("post", json_data={"predictions": []}))
    with pytest.raises(ProviderError):
        await provider.edit("p", b"raw", EditOptions())


def test_translate_provider_error():
    assert "safety" in translate_provider_error("Request blocked by policy")
    assert "busy" in translate_provider_error("429 RESOURCE_EXHAUSTED")
    assert "credentials" in translate_provider_error("PERMISSION_DENIED")
    assert "try the edit again" in translate_provider_error("something odd")


@pytest.mark.asyncio
async def test_transport_errors_are_provider_errors(provider_factory):
    session = mock_session("post")
    session.post.side_effect = aiohttp.ClientConnectionError("connection reset")
    provider = provider_factory(session)

    with pytest.raises(ProviderError) as exc_info:
        await provider.edit("p", b"raw", EditOptions())
    assert "connection reset" in exc_info.value.message


def test_status_codes_are_matched_exactly():
    generic = translate_provider_error("something odd")
    assert translate_provider_error("request 4003 failed after 1400 bytes", status=500) == generic
    assert translate_provider_error("denied", status=403) == translate_provider_error("PERMISSION_DENIED")
    assert translate_provider_error("bad mask", status=400) == translate_provider_error("invalid argument")
    assert translate_provider_error("slow down", status=429) == translate_provider_error("quota exceeded")
