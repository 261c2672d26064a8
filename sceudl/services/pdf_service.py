# File: sceudl/services/pdf_service.py
"""
Client for the PDF ingestion backend.
Uploads a class-schedule PDF and returns the extracted class-time lines.
"""

import requests
from typing import Any, List, Optional

from sceudl.core.config_manager import Config
from sceudl.utils.logger import setup_logger
from sceudl.models import PdfIngestionResponse

logger = setup_logger(__name__)


def _class_times_from(payload: Any) -> Optional[List[str]]:
    """Pull classTimes from either response shape the backend emits."""
    if not isinstance(payload, dict):
        return None

    class_times = payload.get("classTimes")
    if class_times is None and isinstance(payload.get("schedule"), dict):
        class_times = payload["schedule"].get("classTimes")

    if not isinstance(class_times, list):
        return None
    return [str(line) for line in class_times if line]


class PdfIngestionClient:
    """Posts PDFs to the upload endpoint."""

    def __init__(self, base_url: str = Config.PDF_SERVICE_URL, timeout: int = Config.REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}/upload-pdf"

    def extract_class_times(self, pdf_bytes: bytes, filename: str) -> PdfIngestionResponse:
        """
        Upload a PDF and return its class-time lines.

        Args:
            pdf_bytes: File contents
            filename: Original file name, forwarded with the upload

        Returns:
            PdfIngestionResponse; status 'fail' with a message on any error
        """
        if not pdf_bytes:
            return PdfIngestionResponse(status="fail", message="No PDF content to upload")

        logger.info(f"Uploading {filename} ({len(pdf_bytes)} bytes) to {self.upload_url}")

        try:
            response = requests.post(
                self.upload_url,
                files={"pdf": (filename, pdf_bytes, "application/pdf")},
                timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout:
            logger.error("PDF upload timed out")
            return PdfIngestionResponse(status="fail", message="PDF upload timed out")
        except requests.exceptions.RequestException as e:
            logger.error(f"PDF upload failed: {e}", exc_info=True)
            return PdfIngestionResponse(status="fail", message=f"Could not process the PDF: {e}")
        except ValueError as e:
            logger.error(f"PDF backend returned invalid JSON: {e}", exc_info=True)
            return PdfIngestionResponse(status="fail", message="PDF backend returned an invalid response")

        class_times = _class_times_from(payload)
        if class_times is None:
            logger.error("PDF backend response has no classTimes")
            return PdfIngestionResponse(status="fail", message="No class times found in the PDF")

        logger.info(f"Extracted {len(class_times)} class-time lines from {filename}")
        return PdfIngestionResponse(status="success", class_times=class_times)
