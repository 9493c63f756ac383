#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: loop.py

import random
import threading
from dataclasses import dataclass
from typing import Optional
from requests.exceptions import RequestException
from .environ import Environ
from .logger import ConsoleLogger, FileLogger
from .classifier import Verdict
from .exceptions import UCASElectiveException

environ = Environ()
cout = ConsoleLogger("loop")
ferr = FileLogger("loop.error")  # loop 的子日志，同步输出到 console

MIN_REFRESH_INTERVAL = 0.1


@dataclass
class CourseTask:
    course_code: str
    attempt_count: int = 1
    last_verdict: Optional[Verdict] = None
    finished: bool = False
    consecutive_errors: int = 0


def _get_refresh_interval(interval, deviation):
    if deviation <= 0:
        return max(MIN_REFRESH_INTERVAL, interval)
    delta = (random.random() * 2 - 1) * deviation * interval
    return max(MIN_REFRESH_INTERVAL, interval + delta)


def _compute_backoff(base, errors, threshold, factor, max_extra):
    if errors <= 0:
        return base
    if errors < threshold:
        return base
    exp = errors - threshold + 1
    extra = base * (factor ** exp - 1.0)
    extra = min(max_extra, max(0.0, extra))
    return base + extra


class RetryScheduler(object):
    """
    One retry loop per course code, each in its own thread, all of them
    funnelled through a single ``SubmissionGate``.

    With ``stop_on_terminal`` a loop quits after SUCCESS or SCHEDULE_CONFLICT.
    Without it the loop keeps submitting forever and only the attempt counter
    stops moving, the way the tool always behaved.
    """

    def __init__(self, gate, course_codes, interval=1.0, random_deviation=0.0,
                 stop_on_terminal=True, backoff_enable=False, backoff_factor=1.6,
                 backoff_max=60.0, backoff_threshold=2, stop_event=None):
        self._gate = gate
        self.tasks = [CourseTask(code) for code in course_codes]
        self.interval = interval
        self.random_deviation = random_deviation
        self.stop_on_terminal = stop_on_terminal
        self.backoff_enable = backoff_enable
        self.backoff_factor = backoff_factor
        self.backoff_max = backoff_max
        self.backoff_threshold = backoff_threshold
        self.stop_event = stop_event if stop_event is not None else threading.Event()

    @classmethod
    def from_config(cls, gate, course_codes, config, **kwargs):
        return cls(
            gate,
            course_codes,
            interval=config.refresh_interval,
            random_deviation=config.refresh_random_deviation,
            stop_on_terminal=config.stop_on_terminal,
            backoff_enable=config.refresh_backoff_enable,
            backoff_factor=config.refresh_backoff_factor,
            backoff_max=config.refresh_backoff_max,
            backoff_threshold=config.refresh_backoff_threshold,
            **kwargs,
        )

    @property
    def all_finished(self):
        return all(task.finished for task in self.tasks)

    def stop(self):
        self.stop_event.set()

    def get_sleep_time(self, task):
        t = _get_refresh_interval(self.interval, self.random_deviation)
        if self.backoff_enable:
            t = _compute_backoff(
                t,
                task.consecutive_errors,
                self.backoff_threshold,
                self.backoff_factor,
                self.backoff_max,
            )
        return t

    def run_once(self, task):
        environ.incr("submit_loop")
        try:
            attempt = self._gate.submit(task.course_code, task.attempt_count)

        except (UCASElectiveException, RequestException) as e:
            ferr.error(e)
            cout.warning("%s encountered (sid: %s, count: %d)"
                         % (e.__class__.__name__, task.course_code, task.attempt_count))
            self._record_failure(task, e)
            return None

        except Exception as e:
            ferr.exception(e)
            self._record_failure(task, e)
            return None

        task.consecutive_errors = 0
        task.last_verdict = attempt.verdict
        if attempt.verdict.is_terminal:
            if self.stop_on_terminal:
                task.finished = True
        else:
            task.attempt_count += 1
        return attempt

    def _record_failure(self, task, e):
        environ.add_error(e)
        task.attempt_count += 1
        task.consecutive_errors += 1

    def run_task(self, task):
        while not self.stop_event.is_set():
            self.run_once(task)
            if task.finished:
                cout.info("Quit loop of %s (%s)" % (task.course_code, task.last_verdict.name))
                return
            if self.stop_event.wait(self.get_sleep_time(task)):
                break
        cout.info("Stop loop of %s" % task.course_code)

    def start(self, thread_factory=threading.Thread):
        threads = []
        for task in self.tasks:
            t = thread_factory(target=self.run_task, args=(task,), name="Course-%s" % task.course_code)
            t.daemon = True
            t.start()
            threads.append(t)
        return threads
