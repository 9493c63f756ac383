#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import threading
import unittest

from portal_mock import FakePortal

from ucaselective.classifier import Verdict
from ucaselective.gate import SubmissionGate
from ucaselective.loop import RetryScheduler
from ucaselective.manager import SessionManager
from ucaselective.session import Session


class ExclusivityOfflineTest(unittest.TestCase):
    def _make_gate(self):
        session = Session()
        manager = SessionManager("u", "p")
        return SubmissionGate(session, manager, manager._jwxk)

    def test_no_overlapping_requests(self):
        rounds = 5
        codes = ["%06d" % (100000 + i) for i in range(8)]
        bodies = []
        for i in range(len(codes) * rounds):
            bodies.append("请重新登录" if i % 7 == 3 else "超过限选人数")
        portal = FakePortal(save_bodies=bodies, delay=0.002)
        gate = self._make_gate()
        start = threading.Barrier(len(codes))
        results = []
        results_lock = threading.Lock()
        errors = []

        def _worker(code):
            try:
                start.wait()
                for n in range(rounds):
                    attempt = gate.submit(code, n + 1)
                    with results_lock:
                        results.append(attempt)
            except Exception as e:
                errors.append(e)

        with portal.patch():
            threads = [threading.Thread(target=_worker, args=(c,)) for c in codes]
            for t in threads:
                t.start()
            for t in threads:
                t.join(timeout=30)

        self.assertEqual(errors, [])
        self.assertEqual(portal.max_active, 1)
        self.assertEqual(len(portal.save_calls()), len(codes) * rounds)
        expired = sum(1 for a in results if a.verdict is Verdict.SESSION_EXPIRED)
        # one initial login plus one per expiry
        self.assertEqual(portal.logins, 1 + expired)
        self.assertTrue(gate.session.is_authenticated)

    def test_scheduler_threads_share_one_gate(self):
        codes = ["111111", "222222", "333333"]
        bodies = ["超过限选人数"] * 6 + ["选课成功"] * 3
        portal = FakePortal(save_bodies=bodies, default_save_body="选课成功", delay=0.001)
        gate = self._make_gate()
        scheduler = RetryScheduler(gate, codes, interval=0.0)

        with portal.patch():
            threads = scheduler.start()
            for t in threads:
                t.join(timeout=30)

        self.assertTrue(scheduler.all_finished)
        self.assertEqual(portal.max_active, 1)
        self.assertEqual(portal.logins, 1)
        for task in scheduler.tasks:
            self.assertIs(task.last_verdict, Verdict.SUCCESS)


if __name__ == "__main__":
    unittest.main()
