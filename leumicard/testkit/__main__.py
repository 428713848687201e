"""
Run the Leumi Card driver as a standalone stub server.

Every GET is approved with the given transaction id (CCode=800 when the
request carries Postpone=True, CCode=0 otherwise), which is enough to
point a locally running application at a fake provider.

    python -m leumicard.testkit --port 10019 --transaction-id 4638202
"""

import argparse
import logging
import time
from typing import Optional

from fastapi import Request, Response
from fastapi.responses import HTMLResponse

from leumicard.config import settings
from leumicard.models.enums import RequestFields, ResponseCode
from leumicard.protocol.request_builder import POSTPONE_FLAG
from leumicard.testkit.driver import LeumiCardDriver, canned_response

logger = logging.getLogger("leumicard.testkit")


def approve_all(transaction_id: str):
    def handler(request: Request) -> Optional[Response]:
        if request.method != "GET":
            return None
        postponed = request.query_params.get(RequestFields.POSTPONE.value) == POSTPONE_FLAG
        code = ResponseCode.APPROVED_POSTPONED if postponed else ResponseCode.APPROVED
        return HTMLResponse(canned_response(code, transaction_id))

    return handler


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Stub Leumi Card endpoint")
    parser.add_argument("--port", type=int, default=settings.driver_port)
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--transaction-id", default="4638202")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    driver = LeumiCardDriver(port=args.port, host=args.host)
    driver.probe.handlers.append(approve_all(args.transaction_id))
    driver.start()
    logger.info("Approving every GET on %s with Id=%s (Ctrl-C to stop)", driver.url, args.transaction_id)

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        driver.stop()


if __name__ == "__main__":
    main()
