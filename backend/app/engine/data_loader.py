"""
Fetch and parse the monthly temperature variance dataset.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.config import DATASET_URL, FETCH_TIMEOUT
from app.models.dataset import Dataset

logger = logging.getLogger(__name__)


class DatasetLoadError(RuntimeError):
    """The dataset could not be retrieved or did not have the expected shape."""


def parse_dataset(payload: dict) -> Dataset:
    """
    Validate a decoded JSON payload as a Dataset.

    Raises:
        DatasetLoadError: if keys are missing, types are wrong, the record
            list is empty or a month falls outside 1-12.
    """
    try:
        return Dataset.model_validate(payload)
    except ValidationError as e:
        raise DatasetLoadError(f"Malformed dataset: {e.error_count()} validation error(s)") from e


async def fetch_dataset(
    url: str = DATASET_URL,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = FETCH_TIMEOUT,
) -> Dataset:
    """
    Issue a single GET for the dataset and parse the body.

    A caller-supplied client is used as-is and left open; otherwise a
    short-lived client is created for this one request.
    """
    logger.info("Fetching temperature dataset from %s", url)
    try:
        if client is not None:
            response = await client.get(url, timeout=timeout)
        else:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as e:
        logger.warning("Dataset request failed: %s", e)
        raise DatasetLoadError(f"Could not fetch dataset: {e}") from e
    except ValueError as e:
        logger.warning("Dataset response is not valid JSON: %s", e)
        raise DatasetLoadError(f"Dataset response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise DatasetLoadError("Dataset response must be a JSON object")

    dataset = parse_dataset(payload)
    logger.info(
        "Loaded %d monthly records (base temperature %.2f)",
        len(dataset.monthly_variance), dataset.base_temperature,
    )
    return dataset
