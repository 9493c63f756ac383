#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: cli.py

from optparse import OptionParser
from threading import Thread
import time
from . import __version__, __date__


def create_default_parser():

    parser = OptionParser(
        description='UCAS Auto-Elective Tool v%s (%s)' % (__version__, __date__),
        version=__version__,
    )

    ## custom input files

    parser.add_option(
        '-c',
        '--config',
        dest='config_ini',
        metavar="FILE",
        help='custom config file encoded with utf8',
    )

    parser.add_option(
        '-l',
        '--course-list',
        dest='course_list',
        metavar="FILE",
        help='custom course list file, one 6-digit course code per line',
    )

    ## boolean (flag) options

    parser.add_option(
        '-k',
        '--keep-retrying',
        dest='keep_retrying',
        action='store_true',
        default=False,
        help='keep submitting a course even after success or a time conflict',
    )

    return parser


def setup_default_environ(options, args, environ):

    environ.config_ini = options.config_ini
    environ.course_list = options.course_list
    environ.keep_retrying = options.keep_retrying


def run():

    from .environ import Environ
    from .logger import ConsoleLogger, FileLogger
    from .config import UCASElectiveConfig
    from .session import Session
    from .sep import SEPClient
    from .jwxk import JWXKClient
    from .manager import SessionManager
    from .gate import SubmissionGate
    from .loop import RetryScheduler
    from .exceptions import ConfigError, AuthenticationError

    environ = Environ()
    cout = ConsoleLogger("cli")
    ferr = FileLogger("cli.error")

    parser = create_default_parser()
    options, args = parser.parse_args()

    setup_default_environ(options, args, environ)

    # nothing touches the network until the whole config is known to be valid
    try:
        config = UCASElectiveConfig()
        config.check_credentials()
        config.check_numbers()
        course_codes = config.get_course_codes()
    except ConfigError as e:
        cout.error(e)
        return 1

    cout.info("Load %d course(s): %s" % (len(course_codes), ", ".join(course_codes)))

    session = Session()
    sep = SEPClient(timeout=config.client_timeout)
    jwxk = JWXKClient(timeout=config.client_timeout)
    manager = SessionManager(config.username, config.password, sep=sep, jwxk=jwxk)
    gate = SubmissionGate(session, manager, jwxk, dump_body=config.is_debug_dump_body)

    try:
        gate.authenticate()
    except AuthenticationError as e:
        ferr.error(e)
        cout.warning("Initial login failed, retry before the first submission")

    scheduler = RetryScheduler.from_config(gate, course_codes, config)

    for task, t in zip(scheduler.tasks, scheduler.start(thread_factory=Thread)):
        environ.course_threads[task.course_code] = t

    last_restart = {}
    try:
        while True:
            time.sleep(1.0)
            if scheduler.all_finished:
                cout.info("All courses finished")
                break
            for task in scheduler.tasks:
                t = environ.course_threads.get(task.course_code)
                if task.finished or (t is not None and t.is_alive()):
                    continue
                now = time.time()
                last = last_restart.get(task.course_code, 0)
                if now - last < 5.0:
                    continue
                cout.warning("Thread of %s not alive, restarting" % task.course_code)
                nt = Thread(target=scheduler.run_task, args=(task,), name="Course-%s" % task.course_code)
                nt.daemon = True
                nt.start()
                environ.course_threads[task.course_code] = nt
                last_restart[task.course_code] = now
    except KeyboardInterrupt:
        scheduler.stop()
    finally:
        sep.close()
        jwxk.close()

    cout.info("submit_loop: %d, login_count: %d, errors: %s"
              % (environ.submit_loop, environ.login_count, dict(environ.errors)))
    return 0
