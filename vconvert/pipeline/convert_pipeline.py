import concurrent.futures
import traceback
from typing import List, Optional, Sequence

from loguru import logger

from ..domain.job import ConversionJob
from ..services.job_runner import run_job


class ConvertPipeline:
    """
    Runs a list of conversion jobs to completion, one after another or in parallel.

    In concurrent mode every job is submitted to a thread pool at once. Unless
    `max_workers` is given the pool has one thread per job, so every FFmpeg
    process starts immediately. `run()` only returns after all jobs finished.
    """

    def __init__(self, jobs: Sequence[ConversionJob], concurrent: bool = False, max_workers: Optional[int] = None):
        self.jobs: List[ConversionJob] = list(jobs)
        self.concurrent = concurrent
        self.max_workers = max_workers

    def run(self) -> List[bool]:
        """
        Runs every job and returns their outcomes in input order.

        The outcomes are only used for the summary log line; a failed job never
        stops the remaining ones.
        """
        if not self.jobs:
            logger.info("No conversion jobs to run.")
            return []

        if self.concurrent:
            results = self._run_concurrent()
        else:
            results = self._run_sequential()

        succeeded = sum(1 for ok in results if ok)
        logger.info(f"{succeeded}/{len(results)} conversion(s) succeeded.")
        return results

    def _run_sequential(self) -> List[bool]:
        logger.debug(f"Running {len(self.jobs)} job(s) sequentially.")
        return [self._run_one(job) for job in self.jobs]

    def _run_concurrent(self) -> List[bool]:
        max_workers = max(1, self.max_workers or len(self.jobs))
        logger.info(f"Running {len(self.jobs)} job(s) concurrently with {max_workers} worker thread(s).")

        results: List[bool] = [False] * len(self.jobs)
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="convert"
        ) as executor:
            futures = {
                executor.submit(self._run_one, job): index
                for index, job in enumerate(self.jobs)
            }
            for future in concurrent.futures.as_completed(futures):
                results[futures[future]] = future.result()
        return results

    @staticmethod
    def _run_one(job: ConversionJob) -> bool:
        try:
            return run_job(job)
        except Exception as exc:
            # The runner contains conversion errors itself; anything reaching this
            # point is unexpected, but it must still only fail its own job.
            tb_str = traceback.format_exception(exc)
            logger.error(
                f"Unexpected error while converting {job.input_file}:\n"
                f"Exception type: {type(exc).__name__}\n"
                f"Exception message: {exc}\n"
                f"Traceback: {''.join(tb_str)}"
            )
            return False
