"""
Keep the server quiet while the tests run, the middleware logs
every forbidden path and unsatisfiable range at WARNING.
"""
import logging

import pytest


@pytest.fixture(scope='session', autouse=True)
def quiet_loggers():
    for lname in ('asyncio', 'httpx'):
        logging.getLogger(lname).setLevel(logging.WARNING)
    yield
