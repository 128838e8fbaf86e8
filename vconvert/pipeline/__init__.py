"""
This package contains the conversion pipeline of vconvert.

The pipeline takes the jobs produced by the job builder and decides how they run:
strictly in order, or all at once on a thread pool. It waits for every job before
reporting that the run is complete.
"""
