"""Route application messages to structlog by label.

Run with::

    LABELBUS_SERVICE_NAME=checkout LABELBUS_REDACT_SENSITIVE=true \
        python docs/examples/routing.py
"""
from __future__ import annotations

import logging

from labelbus.adapters.structlog import StructlogReceiver
from labelbus.application.hub import create_context
from labelbus.application.receivers import guarded
from labelbus.config import BusSettings, EnvSettingsLoader, SettingsFactory
from labelbus.observability.logging import JsonLoggerFactory


def main() -> None:
    JsonLoggerFactory.configure(level=logging.DEBUG)
    settings = SettingsFactory.create(BusSettings, loaders=[EnvSettingsLoader()])
    ctx = create_context(settings)

    # everything at info and above goes to structlog
    ctx.messages.match_all().set_log_level(30).add_receiver(StructlogReceiver())

    # payment traffic is collected separately, whatever its severity
    payments: list[str] = []
    with ctx.messages.match_labels({"area": "payments"}) as stream:
        stream.add_receiver(guarded(lambda message: payments.append(str(message.value))))

        ctx.logger.info("cart loaded", {"area": "cart"})
        ctx.logger.debug("card tokenised", {"area": "payments", "password": "hunter2"})
        ctx.logger.error("charge declined", {"area": "payments"})

    # the payments branch detached on exit; this only reaches structlog
    ctx.logger.warn("retrying charge", {"area": "payments"})

    print(payments)


if __name__ == "__main__":
    main()
