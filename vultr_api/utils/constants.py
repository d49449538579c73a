"""API locations, wire keys and reusable phrases."""
DEFAULT_API_BASE_URL = "https://api.vultr.com/"
API_KEY_HEADER = "API-Key"

# Boolean parameters are sent as literal strings.
WIRE_YES = "yes"
WIRE_NO = "no"

# Wire format of every timestamp the API returns.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Endpoints, relative to the base URL.
ACCOUNT_INFO = "v1/account/info"
REGIONS_LIST = "v1/regions/list"
PLANS_LIST = "v1/plans/list"
OS_LIST = "v1/os/list"
APP_LIST = "v1/app/list"
SNAPSHOT_LIST = "v1/snapshot/list"
SNAPSHOT_CREATE = "v1/snapshot/create"
SNAPSHOT_DESTROY = "v1/snapshot/destroy"
ISO_LIST = "v1/iso/list"
SCRIPT_LIST = "v1/startupscript/list"
SCRIPT_CREATE = "v1/startupscript/create"
SCRIPT_UPDATE = "v1/startupscript/update"
SCRIPT_DESTROY = "v1/startupscript/destroy"
SERVER_LIST = "v1/server/list"
SERVER_CREATE = "v1/server/create"
SERVER_DESTROY = "v1/server/destroy"
SERVER_OS_CHANGE_LIST = "v1/server/os_change_list"
SERVER_UPGRADE_PLAN_LIST = "v1/server/upgrade_plan_list"
SERVER_GET_USER_DATA = "v1/server/get_user_data"
DNS_LIST = "v1/dns/list"
DNS_CREATE_DOMAIN = "v1/dns/create_domain"
DNS_DELETE_DOMAIN = "v1/dns/delete_domain"
DNS_RECORDS = "v1/dns/records"
DNS_CREATE_RECORD = "v1/dns/create_record"
DNS_UPDATE_RECORD = "v1/dns/update_record"
DNS_DELETE_RECORD = "v1/dns/delete_record"

# Documented meaning of the non-success statuses the API returns.
HTTP_STATUS_HINTS = {
    400: "Invalid API location. Check the URL that you are using.",
    403: "Invalid or missing API key. Check that your API key is present and matches your assigned key.",
    405: "Invalid HTTP method. Check that the method (POST|GET) matches what the documentation indicates.",
    412: "Request failed. Check the response body for a more detailed description.",
    500: "Internal server error. Try again at a later time.",
    503: "Rate limit hit. API requests are limited to an average of 2/s. Try your request again later.",
}
MISSING_API_KEY = "No API key configured. Set VULTR_API_KEY or pass api_key explicitly."
