from enum import Enum
from typing import Optional


class SlackErrorCategory(Enum):
    TRANSPORT = "transport"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    ARGUMENT = "argument"
    IDENTIFIER = "identifier"
    CHANNEL_STATE = "channel_state"
    MESSAGE_STATE = "message_state"
    UNKNOWN = "unknown"


class SlackErrorKind(Enum):
    HTTP_ERROR = "http_error"
    IO_ERROR = "io_error"
    JSON_PARSE_ERROR = "json_parse_error"
    URL_PARSE_ERROR = "url_parse_error"

    NO_AUTH_TOKEN = "no_auth_token"
    INVALID_AUTH_TOKEN = "invalid_auth_token"
    INACTIVE_AUTH_TOKEN = "inactive_auth_token"

    METHOD_FORBIDDEN_FOR_BOTS = "method_forbidden_for_bots"
    METHOD_FORBIDDEN_FOR_RESTRICTED_USER = "method_forbidden_for_restricted_user"
    METHOD_FORBIDDEN_FOR_SINGLE_CHANNEL_GUEST = "method_forbidden_for_single_channel_guest"

    USER_NOT_FOUND = "user_not_found"
    INVALID_METHOD_ARG = "invalid_method_arg"
    INVALID_ARRAY_ARG = "invalid_array_arg"
    INVALID_CHARSET = "invalid_charset"
    INVALID_FORM_DATA = "invalid_form_data"
    INVALID_POST_TYPE = "invalid_post_type"
    MISSING_POST_TYPE = "missing_post_type"
    REQUEST_TIMEOUT = "request_timeout"
    INVALID_TIMESTAMP = "invalid_timestamp"

    INVALID_CHANNEL_ID = "invalid_channel_id"
    INVALID_USER_ID = "invalid_user_id"

    CHANNEL_ACTION_RESTRICTED = "channel_action_restricted"
    NO_CHANNEL = "no_channel"
    CHANNEL_NAME_TAKEN = "channel_name_taken"
    NOT_IN_CHANNEL = "not_in_channel"
    CHANNEL_IS_ARCHIVED = "channel_is_archived"
    CANNOT_ARCHIVE_GENERAL_CHANNEL = "cannot_archive_general_channel"
    CANNOT_INVITE_SELF_TO_CHANNEL = "cannot_invite_self_to_channel"
    USER_ALREADY_MEMBER_OF_CHANNEL = "user_already_member_of_channel"
    CANNOT_INVITE_USER_TO_CHANNEL = "cannot_invite_user_to_channel"
    TOO_MANY_USERS_INVITED_AT_ONCE = "too_many_users_invited_at_once"
    CANNOT_ARCHIVE_LAST_RESTRICTED_ACTION_CHANNEL = "cannot_archive_last_restricted_action_channel"
    CHANNEL_NOT_FOUND = "channel_not_found"
    CANNOT_LEAVE_GENERAL_CHANNEL = "cannot_leave_general_channel"
    CHANNEL_PURPOSE_OR_TOPIC_TOO_LONG = "channel_purpose_or_topic_too_long"
    CHANNEL_NOT_ARCHIVED = "channel_not_archived"

    MESSAGE_NOT_FOUND = "message_not_found"
    USER_CANNOT_DELETE_MESSAGE = "user_cannot_delete_message"
    COMPLIANCE_EXPORTS_PREVENT_DELETION = "compliance_exports_prevent_deletion"
    NO_MESSAGE_CONTENT = "no_message_content"
    MESSAGE_TOO_LONG = "message_too_long"
    MESSAGE_HAS_NO_TEXT = "message_has_no_text"
    MESSAGE_HAS_TOO_MANY_ATTACHMENTS = "message_has_too_many_attachments"
    RATE_LIMITED = "rate_limited"

    UNKNOWN = "unknown"


_CATEGORY_KINDS = {
    SlackErrorCategory.TRANSPORT: (
        SlackErrorKind.HTTP_ERROR,
        SlackErrorKind.IO_ERROR,
        SlackErrorKind.JSON_PARSE_ERROR,
        SlackErrorKind.URL_PARSE_ERROR,
    ),
    SlackErrorCategory.AUTHENTICATION: (
        SlackErrorKind.NO_AUTH_TOKEN,
        SlackErrorKind.INVALID_AUTH_TOKEN,
        SlackErrorKind.INACTIVE_AUTH_TOKEN,
    ),
    SlackErrorCategory.AUTHORIZATION: (
        SlackErrorKind.METHOD_FORBIDDEN_FOR_BOTS,
        SlackErrorKind.METHOD_FORBIDDEN_FOR_RESTRICTED_USER,
        SlackErrorKind.METHOD_FORBIDDEN_FOR_SINGLE_CHANNEL_GUEST,
    ),
    SlackErrorCategory.ARGUMENT: (
        SlackErrorKind.USER_NOT_FOUND,
        SlackErrorKind.INVALID_METHOD_ARG,
        SlackErrorKind.INVALID_ARRAY_ARG,
        SlackErrorKind.INVALID_CHARSET,
        SlackErrorKind.INVALID_FORM_DATA,
        SlackErrorKind.INVALID_POST_TYPE,
        SlackErrorKind.MISSING_POST_TYPE,
        SlackErrorKind.REQUEST_TIMEOUT,
        SlackErrorKind.INVALID_TIMESTAMP,
    ),
    SlackErrorCategory.IDENTIFIER: (
        SlackErrorKind.INVALID_CHANNEL_ID,
        SlackErrorKind.INVALID_USER_ID,
    ),
    SlackErrorCategory.CHANNEL_STATE: (
        SlackErrorKind.CHANNEL_ACTION_RESTRICTED,
        SlackErrorKind.NO_CHANNEL,
        SlackErrorKind.CHANNEL_NAME_TAKEN,
        SlackErrorKind.NOT_IN_CHANNEL,
        SlackErrorKind.CHANNEL_IS_ARCHIVED,
        SlackErrorKind.CANNOT_ARCHIVE_GENERAL_CHANNEL,
        SlackErrorKind.CANNOT_INVITE_SELF_TO_CHANNEL,
        SlackErrorKind.USER_ALREADY_MEMBER_OF_CHANNEL,
        SlackErrorKind.CANNOT_INVITE_USER_TO_CHANNEL,
        SlackErrorKind.TOO_MANY_USERS_INVITED_AT_ONCE,
        SlackErrorKind.CANNOT_ARCHIVE_LAST_RESTRICTED_ACTION_CHANNEL,
        SlackErrorKind.CHANNEL_NOT_FOUND,
        SlackErrorKind.CANNOT_LEAVE_GENERAL_CHANNEL,
        SlackErrorKind.CHANNEL_PURPOSE_OR_TOPIC_TOO_LONG,
        SlackErrorKind.CHANNEL_NOT_ARCHIVED,
    ),
    SlackErrorCategory.MESSAGE_STATE: (
        SlackErrorKind.MESSAGE_NOT_FOUND,
        SlackErrorKind.USER_CANNOT_DELETE_MESSAGE,
        SlackErrorKind.COMPLIANCE_EXPORTS_PREVENT_DELETION,
        SlackErrorKind.NO_MESSAGE_CONTENT,
        SlackErrorKind.MESSAGE_TOO_LONG,
        SlackErrorKind.MESSAGE_HAS_NO_TEXT,
        SlackErrorKind.MESSAGE_HAS_TOO_MANY_ATTACHMENTS,
        SlackErrorKind.RATE_LIMITED,
    ),
    SlackErrorCategory.UNKNOWN: (
        SlackErrorKind.UNKNOWN,
    ),
}

KIND_CATEGORIES = {kind: category for category, kinds in _CATEGORY_KINDS.items() for kind in kinds}

KIND_MESSAGES = {
    SlackErrorKind.HTTP_ERROR: "http transport failure during slack api method call",
    SlackErrorKind.IO_ERROR: "failed to read slack api method response",
    SlackErrorKind.JSON_PARSE_ERROR: "unable to parse slack api method response",
    SlackErrorKind.URL_PARSE_ERROR: "unable to parse slack api method url",
    SlackErrorKind.NO_AUTH_TOKEN: "no auth token provided in slack api method call",
    SlackErrorKind.INVALID_AUTH_TOKEN: "invalid auth token provided in slack api method call",
    SlackErrorKind.INACTIVE_AUTH_TOKEN: "auth token for deleted user or team provided in slack api method call",
    SlackErrorKind.METHOD_FORBIDDEN_FOR_BOTS: "slack api method cannot be called by bots",
    SlackErrorKind.METHOD_FORBIDDEN_FOR_RESTRICTED_USER: "slack api method cannot be called by restricted users",
    SlackErrorKind.METHOD_FORBIDDEN_FOR_SINGLE_CHANNEL_GUEST:
        "slack api method cannot be called by a single channel guest",
    SlackErrorKind.USER_NOT_FOUND: "slack api method specified an invalid user",
    SlackErrorKind.INVALID_METHOD_ARG: "slack api method argument is too long or contains invalid characters",
    SlackErrorKind.INVALID_ARRAY_ARG: "slack api method non-array argument has an array value",
    SlackErrorKind.INVALID_CHARSET: "slack api method call specifies a charset other than utf-8 or iso-8859-1",
    SlackErrorKind.INVALID_FORM_DATA: "slack api method made using POST but the form data was missing or invalid",
    SlackErrorKind.INVALID_POST_TYPE: "slack api method made using POST with an unsupported content type header",
    SlackErrorKind.MISSING_POST_TYPE: "slack api method made using POST with a missing content-type header",
    SlackErrorKind.REQUEST_TIMEOUT:
        "slack api method call made using POST without content or with truncated content",
    SlackErrorKind.INVALID_TIMESTAMP: "invalid timestamp passed to slack api method",
    SlackErrorKind.INVALID_CHANNEL_ID: "slack channel id is missing initial identifier or is malformed",
    SlackErrorKind.INVALID_USER_ID: "slack user id is missing initial identifier or is malformed",
    SlackErrorKind.CHANNEL_ACTION_RESTRICTED: "team settings prevent user from creating channels",
    SlackErrorKind.NO_CHANNEL: "slack api method call missing channel argument",
    SlackErrorKind.CHANNEL_NAME_TAKEN: "channel cannot be created with requested name",
    SlackErrorKind.NOT_IN_CHANNEL: "cannot post message because the user not a member of channel",
    SlackErrorKind.CHANNEL_IS_ARCHIVED: "cannot post message because the channel is archived",
    SlackErrorKind.CANNOT_ARCHIVE_GENERAL_CHANNEL: "cannot archive the '#general' channel",
    SlackErrorKind.CANNOT_INVITE_SELF_TO_CHANNEL: "cannot invite the caller of the api method to the requested channel",
    SlackErrorKind.USER_ALREADY_MEMBER_OF_CHANNEL: "invited user is already a member of the channel",
    SlackErrorKind.CANNOT_INVITE_USER_TO_CHANNEL: "cannot invite the user to the requested channel",
    SlackErrorKind.TOO_MANY_USERS_INVITED_AT_ONCE:
        "invited more than 30 users to the channel in a single slack api method call",
    SlackErrorKind.CANNOT_ARCHIVE_LAST_RESTRICTED_ACTION_CHANNEL: "cannot archive last channel for multi-channel guest",
    SlackErrorKind.CHANNEL_NOT_FOUND: "cannot post message because channel is invalid",
    SlackErrorKind.CANNOT_LEAVE_GENERAL_CHANNEL: "cannot leave the '#general' channel",
    SlackErrorKind.CHANNEL_PURPOSE_OR_TOPIC_TOO_LONG: "channel purpose or topic exceeded 250 characters",
    SlackErrorKind.CHANNEL_NOT_ARCHIVED: "channel not archived, so cannot be unarchived",
    SlackErrorKind.MESSAGE_NOT_FOUND: "message to be modified or deleted cannot be found",
    SlackErrorKind.USER_CANNOT_DELETE_MESSAGE: "user does not have permissions to delete the message",
    SlackErrorKind.COMPLIANCE_EXPORTS_PREVENT_DELETION: "compliance exports are enabled, and prevent message deletion",
    SlackErrorKind.NO_MESSAGE_CONTENT: "attempting to post message with no attachments and no text",
    SlackErrorKind.MESSAGE_TOO_LONG: "cannot post message because text exceeds limit",
    SlackErrorKind.MESSAGE_HAS_NO_TEXT: "cannot post message because it has no content",
    SlackErrorKind.MESSAGE_HAS_TOO_MANY_ATTACHMENTS: "cannot post message because it has too many attachments",
    SlackErrorKind.RATE_LIMITED: "cannot post message because message-posting has been rate-limited",
    SlackErrorKind.UNKNOWN: "slack api method returned unknown error",
}


class SlackError(Exception):
    def __init__(self, kind: SlackErrorKind, error_code: Optional[str] = None, warning: Optional[str] = None,
                 method: Optional[str] = None, detail: Optional[str] = None):
        self.kind = kind
        self.error_code = error_code
        self.warning = warning
        self.method = method
        self.detail = detail
        super().__init__(self._build_message())

    @property
    def category(self) -> SlackErrorCategory:
        return KIND_CATEGORIES[self.kind]

    def _build_message(self) -> str:
        message = KIND_MESSAGES[self.kind]
        if self.kind == SlackErrorKind.UNKNOWN and self.error_code is not None:
            message = f"{message} '{self.error_code}'"
        if self.method:
            message = f"{message} ({self.method})"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message

    # Conversions from foreign failures. Callers raise the result `from` the caught exception.

    @classmethod
    def from_http_error(cls, err: Exception, method: Optional[str] = None) -> "SlackError":
        return cls(SlackErrorKind.HTTP_ERROR, method=method, detail=str(err))

    @classmethod
    def from_io_error(cls, err: Exception, method: Optional[str] = None) -> "SlackError":
        return cls(SlackErrorKind.IO_ERROR, method=method, detail=str(err))

    @classmethod
    def from_json_error(cls, err: Exception, method: Optional[str] = None) -> "SlackError":
        return cls(SlackErrorKind.JSON_PARSE_ERROR, method=method, detail=str(err))

    @classmethod
    def from_url_error(cls, err: Exception, method: Optional[str] = None) -> "SlackError":
        return cls(SlackErrorKind.URL_PARSE_ERROR, method=method, detail=str(err))
