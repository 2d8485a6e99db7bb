"""
SMS Batch Processor for analysing exported bank SMS messages.
Handles JSON and plain-text message files with per-message error tracking.
"""

import json
import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from sms_engine.analyzer import SMSAnalyzer, AnalysisResult
from sms_engine.config.analyzer_config import ANALYZER_CONFIG
from sms_engine.config.snapshot_loader import load_context_snapshot
from sms_engine.context.loader import ContextSnapshot

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Keys that may hold the SMS body in a JSON message object
MESSAGE_TEXT_KEYS = ("text", "sms", "body", "message")


class InvalidInputStructureError(Exception):
    """Raised when a message file cannot be normalized to a list of SMS texts."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    message_ref: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class MessageResult:
    """Analysis result for one message in a batch."""
    message_ref: str
    sms_text: str
    result: AnalysisResult


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_messages: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Direction counts
    income: int = 0
    expense: int = 0

    # Resolution counts
    categorised: int = 0
    account_matched: int = 0

    # Confidence statistics
    total_confidence: float = 0.0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def average_confidence(self) -> float:
        """Average confidence over successful messages."""
        if self.successful == 0:
            return 0.0
        return self.total_confidence / self.successful

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_messages == 0:
            return 0.0
        return (self.successful / self.total_messages) * 100


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    results: List[MessageResult]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)


class SMSBatchProcessor:
    """Batch processor for bank SMS messages."""

    def __init__(
        self,
        snapshot: Optional[ContextSnapshot] = None,
        analyzer: Optional[SMSAnalyzer] = None
    ):
        """
        Initialize the batch processor.

        Args:
            snapshot: Context snapshot used to resolve categories and accounts
            analyzer: Pre-built analyzer (takes precedence over snapshot)
        """
        self.analyzer = analyzer or SMSAnalyzer(snapshot)

        logger.info(
            f"Initialized SMS batch processor: "
            f"{len(self.analyzer.indexes.categories)} categories, "
            f"{len(self.analyzer.indexes.credit_cards)} card keys, "
            f"{len(self.analyzer.indexes.bank_accounts)} account keys"
        )

    def process_messages(
        self,
        messages: List,
        source: str = "batch",
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Analyze a list of SMS messages.

        Args:
            messages: SMS texts (non-string entries are reported as errors)
            source: Label used to build message references
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        stats = BatchStats(
            total_messages=len(messages),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch processing of {len(messages)} messages from {source}")

        for idx, sms_text in enumerate(messages):
            message_ref = f"{source}#{idx + 1}"

            if progress_callback:
                progress_callback(idx + 1, len(messages), f"Processing: {message_ref}")

            stats.processed += 1

            if not isinstance(sms_text, str) or not sms_text.strip():
                error = ProcessingError(
                    message_ref=message_ref,
                    error_type="INVALID_INPUT",
                    error_message=f"Expected non-empty SMS text, got {type(sms_text).__name__}"
                )
                errors.append(error)
                stats.failed += 1
                error_types["INVALID_INPUT"] = error_types.get("INVALID_INPUT", 0) + 1
                logger.error(f"Invalid message {message_ref}: {error.error_message}")
                continue

            result = self.analyzer.analyze(sms_text)
            results.append(MessageResult(message_ref=message_ref, sms_text=sms_text, result=result))

            if result.success:
                stats.successful += 1
                stats.total_confidence += result.confidence
                if result.data["type"] == "income":
                    stats.income += 1
                else:
                    stats.expense += 1
                if result.data["category_id"]:
                    stats.categorised += 1
                if result.data["account_id"]:
                    stats.account_matched += 1
                continue

            if result.error == ANALYZER_CONFIG["messages"]["no_amount"]:
                error_type = "NO_AMOUNT"
            else:
                error_type = "PROCESSING_ERROR"

            errors.append(ProcessingError(
                message_ref=message_ref,
                error_type=error_type,
                error_message=result.error or ""
            ))
            stats.failed += 1
            error_types[error_type] = error_types.get(error_type, 0) + 1
            logger.error(f"Analysis failed for {message_ref}: {result.error}")

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_messages} successful, "
            f"avg confidence: {stats.average_confidence:.2f}, time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def process_files(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Analyze every message in a set of message files.

        Files that cannot be parsed are recorded as errors and skipped.

        Args:
            files: List of (filename, content) tuples
            progress_callback: Optional callback(current, total, message)

        Returns:
            Combined BatchResult for all files
        """
        combined = BatchResult(stats=BatchStats(start_time=datetime.now()), results=[], errors=[])

        for filename, content in files:
            try:
                messages = self.load_messages(filename, content)
            except json.JSONDecodeError as e:
                self._record_file_error(combined, filename, "JSON_PARSE_ERROR", f"Invalid JSON: {str(e)}")
                continue
            except InvalidInputStructureError as e:
                self._record_file_error(combined, filename, "INVALID_INPUT_STRUCTURE", str(e))
                continue
            except Exception as e:
                self._record_file_error(combined, filename, "PROCESSING_ERROR", f"{type(e).__name__}: {str(e)}")
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")
                continue

            batch = self.process_messages(messages, source=Path(filename).stem, progress_callback=progress_callback)
            self._merge_into(combined, batch)

        combined.stats.end_time = datetime.now()
        return combined

    def load_messages(self, filename: str, content: bytes) -> List:
        """
        Load SMS texts from a JSON or plain-text file.

        Supported layouts:
        - JSON list of strings
        - JSON list of objects with a text/sms/body/message field
        - JSON object with a 'messages' list in either layout
        - Plain text with one SMS per line

        Args:
            filename: Filename, used to pick the parser
            content: Raw file bytes

        Returns:
            List of message entries

        Raises:
            json.JSONDecodeError: If a .json file is not valid JSON
            InvalidInputStructureError: If the JSON layout is not recognised
        """
        text = self._decode(content)

        if not filename.lower().endswith(".json"):
            return [line.strip() for line in text.splitlines() if line.strip()]

        data = json.loads(text)
        if isinstance(data, dict):
            if "messages" not in data:
                raise InvalidInputStructureError(
                    f"JSON object in {filename} has no 'messages' key"
                )
            data = data["messages"]

        if not isinstance(data, list):
            raise InvalidInputStructureError(
                f"Unexpected JSON root type in {filename}: {type(data).__name__}. "
                f"Expected list or object with 'messages'."
            )

        return [self._message_text(item) for item in data]

    def _message_text(self, item):
        if isinstance(item, dict):
            for key in MESSAGE_TEXT_KEYS:
                if key in item:
                    return item[key]
        return item

    def _decode(self, content: bytes) -> str:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError:
            # Fallback to cp1252 for Windows-encoded exports
            try:
                return content.decode("cp1252")
            except UnicodeDecodeError:
                return content.decode("latin-1")

    def _record_file_error(
        self,
        batch: BatchResult,
        filename: str,
        error_type: str,
        message: str
    ) -> None:
        batch.errors.append(ProcessingError(
            message_ref=filename,
            error_type=error_type,
            error_message=message
        ))
        batch.error_summary[error_type] = batch.error_summary.get(error_type, 0) + 1
        logger.error(f"{error_type} in {filename}: {message}")

    def _merge_into(self, target: BatchResult, batch: BatchResult) -> None:
        target.stats.total_messages += batch.stats.total_messages
        target.stats.processed += batch.stats.processed
        target.stats.successful += batch.stats.successful
        target.stats.failed += batch.stats.failed
        target.stats.income += batch.stats.income
        target.stats.expense += batch.stats.expense
        target.stats.categorised += batch.stats.categorised
        target.stats.account_matched += batch.stats.account_matched
        target.stats.total_confidence += batch.stats.total_confidence
        target.results.extend(batch.results)
        target.errors.extend(batch.errors)
        for error_type, count in batch.error_summary.items():
            target.error_summary[error_type] = target.error_summary.get(error_type, 0) + count

    def results_to_dataframe(self, results: List[MessageResult]):
        """
        Convert message results to a pandas DataFrame.

        Args:
            results: List of MessageResult objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for message_result in results:
            data = message_result.result.data or {}
            row = {
                "Message Ref": message_result.message_ref,
                "SMS": message_result.sms_text,
                "Success": message_result.result.success,
                "Name": data.get("name"),
                "Amount": data.get("amount"),
                "Type": data.get("type"),
                "Date": data.get("date"),
                "Merchant": data.get("merchant"),
                "Category": data.get("category_name"),
                "Subcategory": data.get("subcategory_name"),
                "Account": data.get("account_name"),
                "Account Type": data.get("account_type"),
                "Confidence": message_result.result.confidence,
                "Error": message_result.result.error or "",
            }
            rows.append(row)

        return pd.DataFrame(rows)

    def errors_to_dataframe(self, errors: List[ProcessingError]):
        """
        Convert processing errors to a pandas DataFrame.

        Args:
            errors: List of ProcessingError objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for error in errors:
            row = {
                "Message Ref": error.message_ref,
                "Error Type": error.error_type,
                "Error Message": error.error_message,
                "Timestamp": error.timestamp,
            }
            rows.append(row)

        return pd.DataFrame(rows)

    def export_csv(self, batch: BatchResult, output_path: str) -> None:
        """Write batch results to CSV (errors go to a sibling *_errors.csv)."""
        output = Path(output_path)
        self.results_to_dataframe(batch.results).to_csv(output, index=False)
        if batch.errors:
            errors_path = output.with_name(f"{output.stem}_errors{output.suffix}")
            self.errors_to_dataframe(batch.errors).to_csv(errors_path, index=False)
        logger.info(f"Exported {len(batch.results)} results to {output}")


def main(messages_path: str, context_path: Optional[str] = None, output_path: Optional[str] = None):
    snapshot = load_context_snapshot(context_path) if context_path else None
    processor = SMSBatchProcessor(snapshot=snapshot)

    with open(messages_path, "rb") as f:
        batch = processor.process_files([(Path(messages_path).name, f.read())])

    print(f"Messages: {batch.stats.total_messages}")
    print(f"Successful: {batch.stats.successful} ({batch.stats.success_rate:.1f}%)")
    print(f"Income/Expense: {batch.stats.income}/{batch.stats.expense}")
    print(f"Average confidence: {batch.stats.average_confidence:.2f}")
    for error_type, count in batch.error_summary.items():
        print(f"  {error_type}: {count}")

    if output_path:
        processor.export_csv(batch, output_path)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python sms_batch_processor.py messages.json [context.json] [output.csv]")
        sys.exit(1)

    main(*sys.argv[1:4])
