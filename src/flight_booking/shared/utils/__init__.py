from .domain_events import log_domain_events as log_domain_events
from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .http_response import handle_errors as handle_errors
from .validators import to_decimal as to_decimal
from .validators import to_non_negative_decimal as to_non_negative_decimal
from .validators import to_non_negative_int as to_non_negative_int
