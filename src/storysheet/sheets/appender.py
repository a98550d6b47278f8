from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from googleapiclient.errors import HttpError

from ..errors import RemoteWriteError
from .client import SheetClientFactory

logger = logging.getLogger(__name__)

# Column order on the sheet. Rows are always written in this order.
RESPONSE_COLUMNS = ("id", "created_at", "nickname", "story")


def format_row(columns: Sequence[str], record: Mapping[str, Any]) -> list[Any]:
    """
    Map a record to cell values in column order.

    Missing or None values become empty strings.
    """
    row = []
    for column in columns:
        value = record.get(column)
        row.append("" if value is None else value)
    return row


class RowAppender:
    """
    Appends single rows to a spreadsheet through the Sheets `values.append` call.
    """

    def __init__(self, factory: SheetClientFactory, spreadsheet_id: str) -> None:
        self.factory = factory
        self.spreadsheet_id = spreadsheet_id

    def append(
        self, range_: str, columns: Sequence[str], record: Mapping[str, Any]
    ) -> dict[str, Any]:
        """
        Append `record` as one new row under `range_`.

        Args:
            range_: A1 range, e.g. "'responses'!A:D".
            columns: Column names in sheet order.
            record: Column name -> value.

        Returns:
            The raw append response from the API.

        Raises:
            RemoteWriteError: If building the client or the API call fails.
        """
        row = format_row(columns, record)
        try:
            sheets = self.factory.get()
            result = (
                sheets.spreadsheets()
                .values()
                .append(
                    spreadsheetId=self.spreadsheet_id,
                    range=range_,
                    valueInputOption="USER_ENTERED",
                    insertDataOption="INSERT_ROWS",
                    body={"values": [row]},
                )
                .execute(http=self.factory.new_http())
            )
        except HttpError as e:
            # str(HttpError) embeds the request URI and spreadsheet ID
            raise RemoteWriteError(e.reason or str(e.resp.status)) from e
        except Exception as e:
            raise RemoteWriteError(str(e)) from e

        logger.debug("Appended row to %s: %s", range_, (result or {}).get("updates"))
        return result or {}
