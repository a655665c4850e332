import csv
import io
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from statement_splitter.logging.logger import Log
from statement_splitter.matching.exceptions import ContactsImportError
from statement_splitter.matching.models import ContactRecord

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ContactsLoadResult:
    contacts: list[ContactRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class ContactsCsvLoader:
    """Reads a contact directory export (account number, email, name) from CSV."""

    ACCOUNT_COLUMNS: Sequence[str] = ("accountNumber", "account_number", "Account Number")
    EMAIL_COLUMNS: Sequence[str] = ("email", "Email", "email_address")
    NAME_COLUMNS: Sequence[str] = (
        "customerName",
        "customer_name",
        "Customer Name",
        "name",
        "Name",
    )

    def load(self, path: Path) -> ContactsLoadResult:
        """Read and parse a CSV file.

        Raises:
            ContactsImportError: if the file cannot be read.
        """
        try:
            text = path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise ContactsImportError(f"Failed to read contacts file: {exc}") from exc
        return self.parse(text)

    def parse(self, text: str) -> ContactsLoadResult:
        """Parse CSV text. Bad rows become "Row N: ..." errors, good rows contacts."""
        reader = csv.DictReader(io.StringIO(text))
        header = reader.fieldnames or []
        account_col = self._pick(header, self.ACCOUNT_COLUMNS)
        email_col = self._pick(header, self.EMAIL_COLUMNS)
        name_col = self._pick(header, self.NAME_COLUMNS)

        result = ContactsLoadResult()
        if account_col is None or email_col is None or name_col is None:
            result.errors.append(
                "CSV must contain columns: Account Number, Email, Customer Name "
                "(or similar variations)"
            )
            return result

        for row in reader:
            line = reader.line_num
            account_id = (row.get(account_col) or "").strip()
            email = (row.get(email_col) or "").strip()
            customer_name = (row.get(name_col) or "").strip()

            if not account_id:
                result.errors.append(f"Row {line}: Missing account number")
            elif not email:
                result.errors.append(f"Row {line}: Missing email address")
            elif not _EMAIL_RE.match(email):
                result.errors.append(f"Row {line}: Invalid email format: {email}")
            elif not customer_name:
                result.errors.append(f"Row {line}: Missing customer name")
            else:
                result.contacts.append(
                    ContactRecord(
                        account_id=account_id,
                        email=email.lower(),
                        customer_name=customer_name,
                    )
                )

        Log.info(
            f"Imported {len(result.contacts)} contacts, {len(result.errors)} rows rejected"
        )
        return result

    @staticmethod
    def _pick(header: Sequence[str], candidates: Sequence[str]) -> str | None:
        for name in candidates:
            if name in header:
                return name
        return None
