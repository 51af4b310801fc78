"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract user identity information from a request (or anything shaped like one)."""
    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
    }


def get_json_body(request_obj) -> Dict[str, Any]:
    """JSON body of the request as a dict; empty when missing or not an object."""
    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else {}
