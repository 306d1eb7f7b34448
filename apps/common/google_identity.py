"""
Google Sign-In integration utilities
"""
import requests
import json
import time
import certifi
import os
from django.conf import settings


GOOGLE_ISSUERS = ('accounts.google.com', 'https://accounts.google.com')


class GoogleIdentityAPI:
    """Verifies Google-issued ID tokens through the tokeninfo endpoint"""

    def __init__(self):
        self.client_ids = [cid for cid in settings.GOOGLE_CLIENT_ID if cid]
        self.tokeninfo_url = settings.GOOGLE_TOKENINFO_URL
        self.timeout = settings.GOOGLE_TIMEOUT_SECONDS
        self.verify_ssl = os.getenv('GOOGLE_VERIFY_SSL', certifi.where())

        # Validate configuration
        if not self.client_ids:
            raise ValueError(
                "Google Sign-In is not configured. Please set GOOGLE_CLIENT_ID in environment variables."
            )

    def verify_id_token(self, id_token):
        """
        Verify an ID token's signature, audience, issuer and expiry.

        Google checks the signature; the claims are checked here.
        Returns (claims, None) on success or (None, error_message).
        """
        if not id_token:
            return None, "Missing identity assertion"

        try:
            response = requests.get(
                self.tokeninfo_url,
                params={'id_token': id_token},
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
            data = response.json()
        except requests.RequestException as e:
            return None, f"Network error: {e}"
        except json.JSONDecodeError:
            return None, "Invalid response from Google tokeninfo"

        if response.status_code != 200 or 'error' in data or 'error_description' in data:
            return None, f"Token rejected: {data.get('error_description') or data.get('error') or response.status_code}"

        if data.get('aud') not in self.client_ids:
            return None, "Token audience mismatch"

        if data.get('iss') not in GOOGLE_ISSUERS:
            return None, "Token issuer mismatch"

        try:
            expires_at = int(data.get('exp', 0))
        except (TypeError, ValueError):
            return None, "Token expiry is malformed"
        if expires_at <= time.time():
            return None, "Token expired"

        email = (data.get('email') or '').strip()
        if not email:
            return None, "Token carries no email"
        if str(data.get('email_verified', '')).lower() != 'true':
            return None, "Token email is not verified"

        return {
            'email': email,
            'name': data.get('name') or '',
            'subject': data.get('sub'),
        }, None
