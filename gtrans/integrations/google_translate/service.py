"""
Google Translate Service Module.

This module provides a function to get an API-key authenticated Google Translate service, a decorator to handle Google API errors, and a generic function to execute the Google API call.

Functions:
    get_google_translate_service(api_key: str) -> googleapiclient.discovery.Resource:
        Returns a Translate v2 service resource authenticated with the given API key.

    handle_google_api_errors(api_name: str) -> Callable:
        Decorator factory that logs any error raised by the decorated call and re-raises it as an UpstreamFailureError.

"""

from functools import wraps
from typing import Any, Callable

from googleapiclient.discovery import Resource, build  # type: ignore
from googleapiclient.errors import HttpError  # type: ignore

from gtrans.core.exceptions import (
    ConfigurationMissingError,
    GtransError,
    UpstreamFailureError,
)
from gtrans.core.logging import get_module_logger

SERVICE_NAME = "translate"
SERVICE_VERSION = "v2"

logger = get_module_logger()


def get_google_translate_service(api_key: str) -> Resource:
    """
    Get a Google Translate service authenticated with an API key.

    Args:
        api_key (str): The Google Translate API key.

    Returns:
        Resource: The Translate v2 service resource.

    Raises:
        ConfigurationMissingError: If the API key is empty.
        UpstreamFailureError: If the service cannot be built.
    """
    if not api_key:
        logger.debug(
            "api_key_missing",
            service=SERVICE_NAME,
            version=SERVICE_VERSION,
        )
        raise ConfigurationMissingError("GOOGLE_TRANSLATE_API_KEY is not set")

    try:
        return build(
            SERVICE_NAME,
            SERVICE_VERSION,
            developerKey=api_key,
            cache_discovery=False,
        )
    except Exception as e:
        logger.debug(
            "google_service_build_error",
            service=SERVICE_NAME,
            version=SERVICE_VERSION,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise UpstreamFailureError(f"fail to create translate client: {e}") from e


def handle_google_api_errors(api_name: str) -> Callable[..., Any]:
    """Decorator to handle Google API errors.

    Args:
        api_name (str): Name of the API used in the error message, e.g. "translate".

    Returns:
        The decorator.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                logger.debug(
                    "executing_google_api_call",
                    function=func.__name__,
                    service="google_translate",
                    api=api_name,
                )
                result = func(*args, **kwargs)
                logger.debug(
                    "google_api_call_success",
                    function=func.__name__,
                    service="google_translate",
                    api=api_name,
                )
                return result
            except GtransError:
                raise
            except HttpError as e:
                # str(e) embeds the request URI, which carries the API key
                status = getattr(e.resp, "status", None)
                reason = getattr(e, "reason", "") or ""
                logger.debug(
                    "google_api_http_error",
                    function=func.__name__,
                    service="google_translate",
                    api=api_name,
                    status=status,
                    reason=reason,
                )
                raise UpstreamFailureError(
                    f"fail to call {api_name} API: HTTP {status} {reason}".rstrip()
                ) from e
            except Exception as e:  # Catch-all for transport and malformed responses
                logger.debug(
                    "google_api_generic_error",
                    function=func.__name__,
                    service="google_translate",
                    api=api_name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise UpstreamFailureError(f"fail to call {api_name} API: {e}") from e

        return wrapper

    return decorator


def execute_google_api_call(
    service: Resource,
    resource_path: str,
    method: str,
    **kwargs: Any,
) -> Any:
    """Execute a Google API call on a resource.

    Args:
        service (Resource): The Google service resource.
        resource_path (str): The path to the resource, which can include nested resources separated by dots.
        method (str): The method to call on the resource.
        **kwargs: Additional keyword arguments for the API call.

    Returns:
        Any: The decoded JSON response of the API call.
    """
    if not service:
        logger.error(
            "service_missing",
            resource_path=resource_path,
            method=method,
            service="google_translate",
        )
        raise ValueError("Service not provided")

    for resource in resource_path.split("."):
        try:
            service = getattr(service, resource)()
        except Exception as e:
            raise AttributeError(
                f"Error accessing {resource} on resource object. Exception: {e}"
            ) from e

    try:
        api_method = getattr(service, method)
    except Exception as e:
        raise AttributeError(
            f"Error executing API method {method}. Exception: {e}"
        ) from e

    return api_method(**kwargs).execute()
