from types import MappingProxyType
from typing import Optional

from src.util.slack_error import SlackError, SlackErrorKind

API_ERROR_KINDS = MappingProxyType({
    "not_authed": SlackErrorKind.NO_AUTH_TOKEN,
    "invalid_auth": SlackErrorKind.INVALID_AUTH_TOKEN,
    "account_inactive": SlackErrorKind.INACTIVE_AUTH_TOKEN,
    "user_is_bot": SlackErrorKind.METHOD_FORBIDDEN_FOR_BOTS,
    "user_is_restricted": SlackErrorKind.METHOD_FORBIDDEN_FOR_RESTRICTED_USER,
    "user_is_ultra_restricted": SlackErrorKind.METHOD_FORBIDDEN_FOR_SINGLE_CHANNEL_GUEST,
    "user_not_found": SlackErrorKind.USER_NOT_FOUND,
    "invalid_arg_name": SlackErrorKind.INVALID_METHOD_ARG,
    "invalid_array_arg": SlackErrorKind.INVALID_ARRAY_ARG,
    "invalid_charset": SlackErrorKind.INVALID_CHARSET,
    "invalid_form_data": SlackErrorKind.INVALID_FORM_DATA,
    "invalid_post_type": SlackErrorKind.INVALID_POST_TYPE,
    "missing_post_type": SlackErrorKind.MISSING_POST_TYPE,
    "request_timeout": SlackErrorKind.REQUEST_TIMEOUT,
    "restricted_action": SlackErrorKind.CHANNEL_ACTION_RESTRICTED,
    "no_channel": SlackErrorKind.NO_CHANNEL,
    "name_taken": SlackErrorKind.CHANNEL_NAME_TAKEN,
    "not_in_channel": SlackErrorKind.NOT_IN_CHANNEL,
    "is_archived": SlackErrorKind.CHANNEL_IS_ARCHIVED,
    "already_archived": SlackErrorKind.CHANNEL_IS_ARCHIVED,
    "cant_archive_general": SlackErrorKind.CANNOT_ARCHIVE_GENERAL_CHANNEL,
    "cant_invite_self": SlackErrorKind.CANNOT_INVITE_SELF_TO_CHANNEL,
    "already_in_channel": SlackErrorKind.USER_ALREADY_MEMBER_OF_CHANNEL,
    "cant_invite": SlackErrorKind.CANNOT_INVITE_USER_TO_CHANNEL,
    "too_many_users": SlackErrorKind.TOO_MANY_USERS_INVITED_AT_ONCE,
    "last_ra_channel": SlackErrorKind.CANNOT_ARCHIVE_LAST_RESTRICTED_ACTION_CHANNEL,
    "channel_not_found": SlackErrorKind.CHANNEL_NOT_FOUND,
    "cant_leave_general": SlackErrorKind.CANNOT_LEAVE_GENERAL_CHANNEL,
    "invalid_timestamp": SlackErrorKind.INVALID_TIMESTAMP,
    "too_long": SlackErrorKind.CHANNEL_PURPOSE_OR_TOPIC_TOO_LONG,
    "not_archived": SlackErrorKind.CHANNEL_NOT_ARCHIVED,
    "message_not_found": SlackErrorKind.MESSAGE_NOT_FOUND,
    "cant_delete_message": SlackErrorKind.USER_CANNOT_DELETE_MESSAGE,
    "compliance_exports_prevent_deletion": SlackErrorKind.COMPLIANCE_EXPORTS_PREVENT_DELETION,
    "msg_too_long": SlackErrorKind.MESSAGE_TOO_LONG,
    "no_text": SlackErrorKind.MESSAGE_HAS_NO_TEXT,
    "too_many_attachments": SlackErrorKind.MESSAGE_HAS_TOO_MANY_ATTACHMENTS,
    "rate_limited": SlackErrorKind.RATE_LIMITED,
})


def classify(error_code: str) -> SlackError:
    # Unknown codes come back as SlackErrorKind.UNKNOWN with the code kept verbatim in error_code
    return SlackError(API_ERROR_KINDS.get(error_code, SlackErrorKind.UNKNOWN), error_code=error_code)


def from_api_error_string(error_code: str, warning: Optional[str] = None,
                          method: Optional[str] = None) -> SlackError:
    classified = classify(error_code)
    return SlackError(classified.kind, error_code=classified.error_code, warning=warning, method=method)
