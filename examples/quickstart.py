# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Insert, update, list and delete a todo item.

Reads the connection from WAMS_SERVICE_URL, WAMS_APP_KEY and WAMS_MASTER_KEY
(or WAMS_AUTH_KEY). The table named on the command line must already exist.
"""

import logging
import sys

from wams_tables import ServiceConfig, TableClient, WamsError

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

table = sys.argv[1] if len(sys.argv) > 1 else "todoitem"
config = ServiceConfig.from_env()
if not config.service_url:
    print("WAMS_SERVICE_URL is not set; exiting.")
    sys.exit(1)


def log_call(call: str) -> None:
    print({"call": call})


try:
    with TableClient(config) as client:
        log_call(f"insert_record('{table}', ...)")
        created = client.insert_record(table, {"text": "Buy milk", "complete": False})
        print(created.to_dict())
        if not created.success:
            sys.exit(1)

        log_call(f"update_record('{table}', {created.id!r}, ...)")
        print(client.update_record(table, created.id, {"complete": True}).to_dict())

        log_call(f"get_records('{table}', filter='complete eq true', top=5, include_count=True)")
        page = client.get_records(table, filter="complete eq true", top=5, include_count=True)
        print({"success": page.success, "count": page.count})
        for record in page:
            print(record)

        log_call(f"delete_record('{table}', {created.id!r})")
        print(client.delete_record(table, created.id).to_dict())
except WamsError as ex:
    print(ex.to_dict())
    sys.exit(2)
