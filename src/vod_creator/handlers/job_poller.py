"""Fixed-interval polling of encoding job state."""

import logging
import time
from collections.abc import Callable

from vod_creator.domain import JobStatus
from vod_creator.infrastructure.interfaces import MediaServicesClient

logger = logging.getLogger(__name__)


class JobPoller:
    """Observes a job until the service reports a terminal state."""

    def __init__(
        self,
        client: MediaServicesClient,
        interval_seconds: float = 30,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._client = client
        self._interval_seconds = interval_seconds
        self._sleep = sleep

    def wait_for_completion(self, transform_name: str, job_name: str) -> JobStatus:
        """
        Blocks until the job is Finished, Error or Canceled.

        The job is queried once per iteration and the poller sleeps only
        after a non-terminal observation. There is no timeout; query
        failures propagate to the caller.

        Args:
            transform_name: Transform the job was submitted to.
            job_name: Name of the job.

        Returns:
            The first terminal JobStatus observed.
        """
        while True:
            job = self._client.get_job(transform_name, job_name)

            logger.info(
                f"Job state: {job.state.value}, progress: {job.progress}",
                extra={
                    "job": job_name,
                    "state": job.state.value,
                    "progress": job.progress,
                },
            )

            if job.state.is_terminal:
                return job

            self._sleep(self._interval_seconds)
