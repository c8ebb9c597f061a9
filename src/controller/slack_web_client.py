import json
import logging
from typing import Optional

import requests
from marshmallow import Schema, ValidationError
from requests.exceptions import ChunkedEncodingError, ContentDecodingError, InvalidSchema, InvalidURL, \
    MissingSchema, RequestException

from src.business.error_classifier import from_api_error_string
from src.business.message_encoder import FORM_CONTENT_TYPE, to_wire_value
from src.controller.slack_dto_schema import ApiResponseDTOSchema
from src.util.settings_parser import DEFAULT_SLACK_API_URL
from src.util.slack_error import SlackError, SlackErrorKind

DEFAULT_RESPONSE_CONTENT_LENGTH = 256
MAX_READ_CHUNK_SIZE = 64 * 1024


class SlackWebClient:
    def __init__(self, slack_api_token: str, slack_api_url: str = DEFAULT_SLACK_API_URL,
                 request_timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self._logger_bot = logging.getLogger("")
        self._slack_api_token = slack_api_token
        self._slack_api_url = slack_api_url.rstrip("/")
        self._request_timeout = request_timeout
        self.slack_session = session or requests.Session()
        self._envelope_schema = ApiResponseDTOSchema()

    def dispatch(self, method: str, params: Optional[dict] = None, response_schema: Optional[Schema] = None,
                 body: Optional[str] = None):
        prepared = self._prepare_request(method, params, body)

        # CA bundle and proxy variables from the environment, as Session.request applies them
        send_settings = self.slack_session.merge_environment_settings(prepared.url, {}, True, None, None)

        self._logger_bot.debug(f"Starting request to Slack ({method})")
        try:
            response = self.slack_session.send(prepared, timeout=self._request_timeout, **send_settings)
        except RequestException as err:
            self._logger_bot.error(f"Slack transport error ({method}): {err}")
            raise SlackError.from_http_error(err, method) from err

        try:
            payload = self._read_json(response, method)
        finally:
            response.close()

        return self._decode(method, payload, response_schema or self._envelope_schema)

    def _prepare_request(self, method: str, params: Optional[dict], body: Optional[str]) -> requests.PreparedRequest:
        query = [("token", self._slack_api_token)]
        query.extend((name, to_wire_value(value)) for name, value in (params or {}).items() if value is not None)

        if body is None:
            request = requests.Request("GET", f"{self._slack_api_url}/{method}", params=query)
        else:
            request = requests.Request("POST", f"{self._slack_api_url}/{method}", params=query, data=body,
                                       headers={"Content-Type": FORM_CONTENT_TYPE})
        try:
            return self.slack_session.prepare_request(request)
        except (MissingSchema, InvalidSchema, InvalidURL) as err:
            self._logger_bot.error(f"Slack API url is invalid ({method}): {err}")
            raise SlackError.from_url_error(err, method) from err

    def _read_json(self, response: requests.Response, method: str):
        # Content-Length is only a sizing hint: servers may misreport it.
        chunk_size = DEFAULT_RESPONSE_CONTENT_LENGTH
        content_length = response.headers.get("Content-Length", "")
        if content_length.isdigit() and int(content_length) > 0:
            chunk_size = min(int(content_length), MAX_READ_CHUNK_SIZE)

        body = bytearray()
        try:
            for chunk in response.iter_content(chunk_size=chunk_size):
                body.extend(chunk)
        except (ChunkedEncodingError, ContentDecodingError, OSError) as err:
            self._logger_bot.error(f"Slack response read error ({method}): {err}")
            raise SlackError.from_io_error(err, method) from err

        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as err:
            self._logger_bot.error(f"Slack response is not valid JSON ({method}). "
                                   f"Status code: {response.status_code} Error: {err}")
            raise SlackError.from_json_error(err, method) from err

    def _decode(self, method: str, payload, response_schema: Schema):
        try:
            envelope = self._envelope_schema.load(payload)
        except ValidationError as err:
            raise SlackError.from_json_error(err, method) from err

        if not envelope.ok:
            if envelope.error is None:
                raise SlackError(SlackErrorKind.JSON_PARSE_ERROR, method=method,
                                 detail="response has ok=false but no error code")
            self._logger_bot.error(f"SlackAPIError ({method}): {envelope.error}")
            raise from_api_error_string(envelope.error, warning=envelope.warning, method=method)

        if envelope.warning:
            self._logger_bot.warning(f"Slack API warning ({method}): {envelope.warning}")

        try:
            return response_schema.load(payload)
        except ValidationError as err:
            self._logger_bot.error(f"Slack response has unexpected shape ({method}): {err.messages}")
            raise SlackError.from_json_error(err, method) from err
