"""
Edit orchestration

Runs one bounded edit call and drives the container publish flow:
CREATED -> POLLING -> FINISHED -> PUBLISHED, or ERROR / TIMED_OUT.
Nothing is retried here; callers own any retry affordance.
"""
import asyncio
import logging
from dataclasses import replace
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from foodsnap.exceptions import (
    ConfigurationError,
    EditTimeoutError,
    FoodsnapError,
    ProviderError,
    PublishTimeoutError,
)
from foodsnap.models import EditedImage, EditJob, EditOptions, JobStatus, PublishResult
from foodsnap.services.imagen_editor import EditProvider, default_base_steps
from foodsnap.services.media_container import ContainerProvider
from foodsnap.utils.logging_config import log_error_with_context, log_job_event

logger = logging.getLogger(__name__)

EDIT_TIMEOUT_MESSAGE = (
    "Your photo was uploaded successfully, but the edit took too long. "
    "Please retry the edit from your gallery."
)


class PublishState(str, Enum):
    CREATED = "created"
    POLLING = "polling"
    FINISHED = "finished"
    PUBLISHED = "published"
    ERROR = "error"
    TIMED_OUT = "timed_out"


PUBLISH_TRANSITIONS = {
    PublishState.CREATED: frozenset({PublishState.POLLING, PublishState.ERROR}),
    PublishState.POLLING: frozenset({
        PublishState.POLLING,
        PublishState.FINISHED,
        PublishState.ERROR,
        PublishState.TIMED_OUT,
    }),
    PublishState.FINISHED: frozenset({PublishState.PUBLISHED, PublishState.ERROR}),
    PublishState.PUBLISHED: frozenset(),
    PublishState.ERROR: frozenset(),
    PublishState.TIMED_OUT: frozenset(),
}

# Provider status codes that end polling successfully
_READY_STATUSES = ("FINISHED", "PUBLISHED")


class _PublishRun:
    """Per-call state machine bookkeeping"""

    def __init__(self):
        self.state = PublishState.CREATED
        self.transitions: List[str] = [PublishState.CREATED.value]

    def advance(self, new_state: PublishState):
        if new_state not in PUBLISH_TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal publish transition {self.state.value} -> {new_state.value}")
        self.state = new_state
        self.transitions.append(new_state.value)


class EditOrchestrator:
    """Bounded edit calls and container publishing"""

    def __init__(
        self,
        edit_provider: EditProvider,
        container_provider: Optional[ContainerProvider] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        request_timeout: float = 60.0,
        poll_interval: float = 1.0,
        max_poll_attempts: int = 30
    ):
        self.edit_provider = edit_provider
        self.container_provider = container_provider
        self.sleep = sleep
        self.request_timeout = request_timeout
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts

    async def run_edit(
        self,
        image_bytes: bytes,
        prompt: str,
        options: Optional[EditOptions] = None,
        job: Optional[EditJob] = None
    ) -> EditedImage:
        """
        Run one edit against the provider.

        Args:
            image_bytes: Source image (PNG/JPEG)
            prompt: Edit instruction
            options: Edit/mask mode, aspect ratio, steps
            job: Optional caller-owned job record to update

        Raises:
            EditTimeoutError: Provider call exceeded the request timeout
            ProviderError: Provider rejected the request
        """
        options = options or EditOptions()
        if options.base_steps is None:
            options = replace(options, base_steps=default_base_steps(options.edit_mode))

        if job is None:
            job = EditJob(
                source_image=image_bytes,
                prompt=prompt,
                edit_mode=options.edit_mode,
                mask_mode=options.mask_mode,
            )
        job.status = JobStatus.IN_PROGRESS
        job.attempts += 1

        try:
            result = await asyncio.wait_for(
                self.edit_provider.edit(prompt, image_bytes, options),
                timeout=self.request_timeout
            )
        except asyncio.TimeoutError:
            job.status = JobStatus.TIMED_OUT
            job.error = f"Edit exceeded {self.request_timeout:g}s"
            logger.warning(f"Edit timed out after {self.request_timeout:g}s ({options.edit_mode.value})")
            raise EditTimeoutError(job.error, user_message=EDIT_TIMEOUT_MESSAGE) from None
        except ProviderError as e:
            job.status = JobStatus.ERROR
            job.error = e.message
            log_error_with_context(logger, e, f"Edit failed ({options.edit_mode.value})")
            raise
        except Exception as e:
            job.status = JobStatus.ERROR
            job.error = str(e) or type(e).__name__
            log_error_with_context(logger, e, f"Edit failed ({options.edit_mode.value})")
            if isinstance(e, FoodsnapError):
                raise
            raise ProviderError(f"Edit failed: {job.error}") from e

        job.status = JobStatus.FINISHED
        return result

    async def publish(
        self,
        image_url: str,
        caption: str,
        job: Optional[EditJob] = None
    ) -> PublishResult:
        """
        Create a media container, poll until it is ready, then publish.

        Sleeps poll_interval before every status check and gives up after
        max_poll_attempts checks that all report IN_PROGRESS.

        Raises:
            ConfigurationError: No container provider configured
            ProviderError: Provider error or container status ERROR
            PublishTimeoutError: Still IN_PROGRESS after the last attempt
        """
        if self.container_provider is None:
            raise ConfigurationError("Publishing is not configured")

        provider = self.container_provider
        run = _PublishRun()
        container_id: Optional[str] = None
        attempts = 0
        try:
            container_id = await provider.create_container(image_url, caption)
            log_job_event(logger, container_id, "container created", image_url)
            if job is not None:
                job.container_id = container_id
                job.status = JobStatus.IN_PROGRESS

            run.advance(PublishState.POLLING)
            while True:
                if attempts >= self.max_poll_attempts:
                    run.advance(PublishState.TIMED_OUT)
                    if job is not None:
                        job.status = JobStatus.TIMED_OUT
                    logger.warning(f"Container {container_id} not ready after {attempts} attempts")
                    raise PublishTimeoutError(container_id, attempts)

                await self.sleep(self.poll_interval)
                status = await provider.get_status(container_id)
                attempts += 1
                if job is not None:
                    job.attempts = attempts

                # Missing status code means the container is ready
                status = (status or "FINISHED").upper()
                logger.debug(f"Container {container_id} status {status} (attempt {attempts})")

                if status == "IN_PROGRESS":
                    run.advance(PublishState.POLLING)
                    continue
                if status in _READY_STATUSES:
                    run.advance(PublishState.FINISHED)
                    break

                run.advance(PublishState.ERROR)
                raise ProviderError(f"Media processing failed: {status}")

            media_id = await provider.publish(container_id)
        except PublishTimeoutError:
            raise
        except FoodsnapError as e:
            self._fail_publish(run, job, e, container_id)
            raise
        except Exception as e:
            error = ProviderError(f"Publish failed: {str(e) or type(e).__name__}")
            self._fail_publish(run, job, error, container_id)
            raise error from e

        run.advance(PublishState.PUBLISHED)
        if job is not None:
            job.status = JobStatus.PUBLISHED
        log_job_event(logger, container_id, "published", f"media {media_id} after {attempts} polls")
        return PublishResult(
            container_id=container_id,
            media_id=media_id,
            attempts=attempts,
            transitions=tuple(run.transitions),
        )

    def _fail_publish(
        self,
        run: _PublishRun,
        job: Optional[EditJob],
        error: FoodsnapError,
        container_id: Optional[str]
    ):
        if run.state != PublishState.ERROR:
            run.advance(PublishState.ERROR)
        if job is not None:
            job.status = JobStatus.ERROR
            job.error = str(error)
        log_error_with_context(logger, error, "Publish failed", job_id=container_id)
