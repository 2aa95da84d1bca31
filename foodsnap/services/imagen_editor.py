"""
Mask-based image editing via Vertex AI Imagen

The provider auto-generates the mask from maskMode, so the request carries
the raw image plus a mask config without mask pixels.
"""
import asyncio
import base64
import binascii
import json
import logging
from typing import Optional, Protocol

import aiohttp
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from foodsnap.config import settings
from foodsnap.exceptions import BillingDisabledError, ConfigurationError, ProviderError
from foodsnap.models import EditedImage, EditMode, EditOptions, MaskMode
from foodsnap.utils.image_utils import from_base64, to_base64

logger = logging.getLogger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

EDIT_MODE_MAP = {
    EditMode.INPAINT_INSERTION: "EDIT_MODE_INPAINT_INSERTION",
    EditMode.INPAINT_REMOVAL: "EDIT_MODE_INPAINT_REMOVAL",
    EditMode.OUTPAINT: "EDIT_MODE_OUTPAINT",
}

MASK_MODE_MAP = {
    MaskMode.BACKGROUND: "MASK_MODE_BACKGROUND",
    MaskMode.FOREGROUND: "MASK_MODE_FOREGROUND",
    MaskMode.SEMANTIC: "MASK_MODE_SEMANTIC",
}

MASK_DILATION = 0.01


class EditProvider(Protocol):
    async def edit(self, prompt: str, image_bytes: bytes, options: EditOptions) -> EditedImage:
        ...


def translate_provider_error(error_message: str, status: Optional[int] = None) -> str:
    """
    Translate provider error messages to user-friendly text.

    Args:
        error_message: Raw error message from API
        status: HTTP status, matched exactly rather than searched for in the text

    Returns:
        User-actionable message
    """
    error_lower = error_message.lower()

    if "billing_disabled" in error_lower or "billing" in error_lower:
        return (
            "Image editing is unavailable: billing is not enabled for the Google Cloud project. "
            "Please enable billing in the Google Cloud Console."
        )

    if "safety" in error_lower or "policy" in error_lower or "blocked" in error_lower:
        return (
            "The edit was blocked by the content safety filter. "
            "Please rephrase your request and try again."
        )

    if "quota" in error_lower or "resource_exhausted" in error_lower or status == 429:
        return "The editing service is busy right now. Please try again in a few minutes."

    if "invalid_argument" in error_lower or "invalid argument" in error_lower or status == 400:
        return "The edit request was not accepted. Try a different image or a simpler prompt."

    if "permission" in error_lower or status == 403:
        return "The editing service rejected the credentials. Please check the service account permissions."

    return "Image editing failed. Your photo was uploaded; please try the edit again."


def default_base_steps(edit_mode: EditMode) -> int:
    # Removal converges in far fewer steps than insertion/outpainting
    return 12 if edit_mode == EditMode.INPAINT_REMOVAL else 35


def build_edit_payload(prompt: str, image_bytes: bytes, options: EditOptions) -> dict:
    """
    Build the Imagen edit request body.

    Exactly two reference images: the raw photo (id 1) and a mask config
    (id 2) with no mask image data.
    """
    base_steps = options.base_steps or default_base_steps(options.edit_mode)

    parameters = {
        "editMode": EDIT_MODE_MAP[options.edit_mode],
        "editConfig": {"baseSteps": base_steps},
        "sampleCount": 1,
        "outputOptions": {"mimeType": "image/png"},
    }
    if options.aspect_ratio:
        parameters["aspectRatio"] = options.aspect_ratio

    return {
        "instances": [
            {
                "prompt": prompt,
                "referenceImages": [
                    {
                        "referenceType": "REFERENCE_TYPE_RAW",
                        "referenceId": 1,
                        "referenceImage": {"bytesBase64Encoded": to_base64(image_bytes)},
                    },
                    {
                        "referenceType": "REFERENCE_TYPE_MASK",
                        "referenceId": 2,
                        "maskImageConfig": {
                            "maskMode": MASK_MODE_MAP[options.mask_mode],
                            "dilation": MASK_DILATION,
                        },
                    },
                ],
            }
        ],
        "parameters": parameters,
    }


def load_service_account_info(credentials_b64: Optional[str]) -> dict:
    """
    Decode base64 service-account JSON.

    Raises:
        ConfigurationError: If missing, undecodable or incomplete
    """
    if not credentials_b64:
        raise ConfigurationError("GOOGLE_VERTEX_AI_CREDENTIALS is not set")

    try:
        info = json.loads(base64.b64decode(credentials_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise ConfigurationError(
            "Failed to parse GOOGLE_VERTEX_AI_CREDENTIALS: invalid base64 or JSON"
        ) from e

    missing = [key for key in ("project_id", "private_key", "client_email") if not info.get(key)]
    if missing:
        raise ConfigurationError(f"Service account credentials missing: {', '.join(missing)}")
    return info


class ImagenEditProvider:
    """Imagen 3 capability model on Vertex AI"""

    def __init__(
        self,
        credentials_b64: Optional[str] = None,
        region: Optional[str] = None,
        model: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.service_account_info = load_service_account_info(
            credentials_b64 or settings.GOOGLE_VERTEX_AI_CREDENTIALS
        )
        self.project_id = self.service_account_info["project_id"]
        self.region = region or settings.VERTEX_AI_REGION
        self.model = model or settings.IMAGEN_EDIT_MODEL
        self.session = session
        self._credentials = None

    @property
    def endpoint(self) -> str:
        return (
            f"https://{self.region}-aiplatform.googleapis.com/v1/projects/{self.project_id}"
            f"/locations/{self.region}/publishers/google/models/{self.model}:predict"
        )

    async def get_access_token(self) -> str:
        """OAuth token for the service account, refreshed when expired"""
        if self._credentials is None:
            try:
                self._credentials = service_account.Credentials.from_service_account_info(
                    self.service_account_info, scopes=[CLOUD_PLATFORM_SCOPE]
                )
            except ValueError as e:
                raise ConfigurationError(f"Invalid service account credentials: {e}") from e

        if not self._credentials.valid:
            # google-auth refresh is blocking
            await asyncio.to_thread(self._credentials.refresh, Request())

        if not self._credentials.token:
            raise ConfigurationError("Failed to get access token from Google Auth - token is empty")
        return self._credentials.token

    async def edit(self, prompt: str, image_bytes: bytes, options: EditOptions) -> EditedImage:
        """
        Run one mask-based edit.

        Raises:
            BillingDisabledError: 403 with BILLING_DISABLED
            ProviderError: Any other rejection or an empty response
        """
        access_token = await self.get_access_token()
        payload = build_edit_payload(prompt, image_bytes, options)
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

        logger.info(
            f"Calling Imagen edit API: mode={options.edit_mode.value}, "
            f"mask={options.mask_mode.value}, steps={payload['parameters']['editConfig']['baseSteps']}"
        )

        try:
            if self.session is not None:
                return await self._post(self.session, payload, headers)

            async with aiohttp.ClientSession() as session:
                return await self._post(session, payload, headers)
        except (aiohttp.ClientError, ValueError) as e:
            # Dropped connections and non-JSON bodies
            logger.error(f"Imagen transport error: {e}", exc_info=True)
            raise ProviderError(
                f"Vertex AI request failed: {e}",
                user_message=translate_provider_error(str(e)),
            ) from e

    async def _post(self, session, payload: dict, headers: dict) -> EditedImage:
        async with session.post(self.endpoint, json=payload, headers=headers) as response:
            if response.status < 200 or response.status >= 300:
                error_text = await response.text()
                logger.error(f"Imagen API error: {response.status} - {error_text}")

                if response.status == 403 and "BILLING_DISABLED" in error_text:
                    raise BillingDisabledError(
                        f"Billing disabled for project {self.project_id}: {error_text}",
                        status=403,
                        user_message=translate_provider_error("BILLING_DISABLED"),
                    )

                raise ProviderError(
                    f"Vertex AI API error: {response.status} - {error_text}",
                    status=response.status,
                    user_message=translate_provider_error(error_text, response.status),
                )

            result = await response.json()

        predictions = result.get("predictions") or []
        if not predictions:
            raise ProviderError("No predictions returned from Vertex AI")

        prediction = predictions[0]
        image_data = prediction.get("bytesBase64Encoded")
        if not image_data:
            raise ProviderError("No image data in Vertex AI response")

        mime_type = prediction.get("mimeType") or "image/png"
        logger.info(f"Imagen edit successful ({mime_type})")
        return EditedImage(image_bytes=from_base64(image_data), mime_type=mime_type)
