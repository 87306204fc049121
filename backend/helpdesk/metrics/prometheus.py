from prometheus_client import Counter, Histogram

tickets_created_total = Counter(
    "tickets_created_total",
    "Total tickets submitted",
    ["category", "priority"],
)

ticket_comments_total = Counter(
    "ticket_comments_total",
    "Total comments appended to tickets",
    ["visibility"],
)

ticket_status_updates_total = Counter(
    "ticket_status_updates_total",
    "Total status changes made by IT staff",
    ["status"],
)

ticket_assignments_total = Counter(
    "ticket_assignments_total",
    "Total ticket assignments",
    ["assignee"],
)

auth_submissions_total = Counter(
    "auth_submissions_total",
    "Login/registration form submissions",
    ["mode", "role", "outcome"],
)

api_request_latency_seconds = Histogram(
    "api_request_latency_seconds",
    "API request latency in seconds",
    ["route", "method", "status"],
)

time_to_resolve_seconds = Histogram(
    "time_to_resolve_seconds",
    "Time from ticket creation to resolution (seconds)",
    ["priority"],
)
