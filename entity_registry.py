"""Closed registry of entity schemas and pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple


Issue = Dict[str, Any]


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    DATE = "date"
    DATETIME = "datetime"
    SELECT = "select"
    MULTISELECT = "multiselect"
    PHONE = "phone"
    EMAIL = "email"
    URL = "url"
    ADDRESS = "address"
    BOOLEAN = "boolean"
    JSON = "json"


STRING_FIELD_TYPES = frozenset(
    {
        FieldType.TEXT,
        FieldType.TEXTAREA,
        FieldType.PHONE,
        FieldType.EMAIL,
        FieldType.URL,
        FieldType.ADDRESS,
    }
)
NUMERIC_FIELD_TYPES = frozenset({FieldType.NUMBER, FieldType.CURRENCY, FieldType.PERCENTAGE})


@dataclass(frozen=True)
class FieldOption:
    value: str
    label: str


@dataclass(frozen=True)
class FieldDescriptor:
    key: str
    label: str
    type: FieldType
    required: bool = False
    section: str | None = None
    options: Tuple[FieldOption, ...] = ()
    help_text: str | None = None

    def option_values(self) -> list[str]:
        return [opt.value for opt in self.options]


@dataclass(frozen=True)
class PipelineStage:
    value: str
    label: str
    color: str


@dataclass(frozen=True)
class EntitySchema:
    entity_type: str
    label: str
    label_plural: str
    icon: str
    color: str
    fields: Tuple[FieldDescriptor, ...]
    list_columns: Tuple[str, ...] = ()
    # Exported hint for server-side data sources; in-memory list search
    # matches every string value of a row.
    searchable_fields: Tuple[str, ...] = ()

    def field(self, key: str) -> FieldDescriptor | None:
        for fd in self.fields:
            if fd.key == key:
                return fd
        return None

    def status_field(self) -> FieldDescriptor | None:
        return self.field("status")


def _issue(code: str, message: str, path: str | None = None, detail: dict | None = None) -> Issue:
    return {"code": code, "message": message, "path": path, "detail": detail}


def _opts(*pairs: Tuple[str, str]) -> Tuple[FieldOption, ...]:
    return tuple(FieldOption(value, label) for value, label in pairs)


def _stages(*rows: Tuple[str, str, str]) -> Tuple[PipelineStage, ...]:
    return tuple(PipelineStage(value, label, color) for value, label, color in rows)


def _f(
    key: str,
    label: str,
    ftype: FieldType = FieldType.TEXT,
    required: bool = False,
    section: str | None = None,
    options: Tuple[FieldOption, ...] = (),
    help_text: str | None = None,
) -> FieldDescriptor:
    return FieldDescriptor(key, label, ftype, required, section, options, help_text)


def _status_field(stages: Tuple[PipelineStage, ...], label: str = "Status") -> FieldDescriptor:
    # status domain is derived from the pipeline so the two cannot drift
    return _f(
        "status",
        label,
        FieldType.SELECT,
        section="status",
        options=tuple(FieldOption(s.value, s.label) for s in stages),
    )


# =============================================================================
# Pipelines
# =============================================================================

CONTACT_PIPELINE = _stages(
    ("new", "New", "#94a3b8"),
    ("qualified", "Qualified", "#60a5fa"),
    ("won", "Won", "#22c55e"),
)

STORE_PIPELINE = _stages(
    ("prospect", "Prospect", "#94a3b8"),
    ("active", "Active", "#22c55e"),
    ("inactive", "Inactive", "#f97316"),
    ("churned", "Churned", "#ef4444"),
)

DEAL_PIPELINE = _stages(
    ("lead", "Lead", "#94a3b8"),
    ("proposal", "Proposal", "#60a5fa"),
    ("negotiation", "Negotiation", "#a78bfa"),
    ("closed_won", "Closed Won", "#22c55e"),
    ("closed_lost", "Closed Lost", "#ef4444"),
)

EMPLOYEE_PIPELINE = _stages(
    ("applicant", "Applicant", "#94a3b8"),
    ("interviewing", "Interviewing", "#60a5fa"),
    ("onboarding", "Onboarding", "#fbbf24"),
    ("active", "Active", "#22c55e"),
    ("terminated", "Terminated", "#ef4444"),
)

CAMPAIGN_PIPELINE = _stages(
    ("draft", "Draft", "#94a3b8"),
    ("scheduled", "Scheduled", "#60a5fa"),
    ("running", "Running", "#fbbf24"),
    ("completed", "Completed", "#22c55e"),
)

PROMO_CAMPAIGN_PIPELINE = _stages(
    ("draft", "Draft", "#94a3b8"),
    ("active", "Active", "#22c55e"),
    ("paused", "Paused", "#f97316"),
    ("ended", "Ended", "#ef4444"),
)

BOOKING_PIPELINE = _stages(
    ("new_lead", "New Lead", "#94a3b8"),
    ("qualified", "Qualified", "#60a5fa"),
    ("quote_sent", "Quote Sent", "#a78bfa"),
    ("deposit_paid", "Deposit Paid", "#fbbf24"),
    ("confirmed", "Confirmed", "#34d399"),
    ("in_progress", "In Progress", "#22d3ee"),
    ("completed", "Completed", "#22c55e"),
    ("follow_up", "Follow-Up", "#f97316"),
    ("cancelled", "Cancelled", "#ef4444"),
)

FUNDING_APPLICATION_PIPELINE = _stages(
    ("intake", "Intake", "#94a3b8"),
    ("document_collection", "Document Collection", "#60a5fa"),
    ("underwriting", "Underwriting", "#a78bfa"),
    ("submission", "Submission", "#fbbf24"),
    ("offers_received", "Offers Received", "#34d399"),
    ("client_accepted", "Client Accepted", "#22d3ee"),
    ("funded", "Funded", "#22c55e"),
    ("closed_lost", "Closed/Lost", "#ef4444"),
)

EVENT_BOOKING_PIPELINE = _stages(
    ("inquiry", "Inquiry", "#94a3b8"),
    ("quote_sent", "Quote Sent", "#60a5fa"),
    ("deposit_paid", "Deposit Paid", "#a78bfa"),
    ("vendor_assigned", "Vendor Assigned", "#fbbf24"),
    ("final_payment_pending", "Final Payment Pending", "#f97316"),
    ("event_scheduled", "Event Scheduled", "#34d399"),
    ("event_complete", "Event Complete", "#22c55e"),
    ("post_event_followup", "Post-Event Follow-up", "#22d3ee"),
)

MODEL_PIPELINE = _stages(
    ("new_lead", "New Lead", "#94a3b8"),
    ("verified", "Verified", "#60a5fa"),
    ("onboarded", "Onboarded", "#a78bfa"),
    ("active", "Active", "#22c55e"),
    ("featured", "Featured", "#fbbf24"),
    ("paused", "Paused", "#f97316"),
    ("offboarded", "Offboarded", "#ef4444"),
)


PIPELINES: Mapping[str, Tuple[PipelineStage, ...]] = {
    "contact": CONTACT_PIPELINE,
    "store": STORE_PIPELINE,
    "deal": DEAL_PIPELINE,
    "employee": EMPLOYEE_PIPELINE,
    "campaign": CAMPAIGN_PIPELINE,
    "promo_campaign": PROMO_CAMPAIGN_PIPELINE,
    "booking": BOOKING_PIPELINE,
    "funding_application": FUNDING_APPLICATION_PIPELINE,
    "event_booking": EVENT_BOOKING_PIPELINE,
    "model": MODEL_PIPELINE,
}


# =============================================================================
# Shared option lists
# =============================================================================

PARTNER_CATEGORIES = _opts(
    ("car_decor_promo", "Car Decor Promo"),
    ("exotic_rental_car_promo", "Exotic Rental Car Promo"),
    ("room_decor_promo", "Room Decor Promo"),
    ("helicopter_promo", "Helicopter Promo"),
    ("private_chef_promo", "Private Chef Promo"),
    ("black_trucks_promo", "Black Trucks Promo"),
    ("sprinter_van_promo", "Sprinter Van Promo"),
    ("party_bus_promo", "Party Bus Promo"),
    ("security_promo", "Security Promo"),
    ("hotel_rooms", "Hotel Rooms"),
    ("luxury_residences", "Mansions / Homes / Condos / Penthouses"),
    ("eventspaces_rooftop", "Event Spaces (Rooftop)"),
    ("photography_videography", "Photography / Videography"),
    ("yachts", "Yachts"),
    ("club_lounge_package", "Club / Lounge Package"),
    ("other", "Other / Custom"),
)

US_STATES = _opts(
    ("CA", "California"),
    ("CT", "Connecticut"),
    ("FL", "Florida"),
    ("GA", "Georgia"),
    ("IL", "Illinois"),
    ("NJ", "New Jersey"),
    ("NV", "Nevada"),
    ("NY", "New York"),
    ("PA", "Pennsylvania"),
    ("TX", "Texas"),
)

CONTRACT_STATUSES = _opts(
    ("pending", "Pending"),
    ("active", "Active"),
    ("expired", "Expired"),
    ("terminated", "Terminated"),
)

PAYOUT_METHODS = _opts(
    ("paypal", "PayPal"),
    ("zelle", "Zelle"),
    ("bank", "Bank Transfer"),
    ("cash", "Cash"),
    ("crypto", "Crypto"),
)


# =============================================================================
# Entity schemas
# =============================================================================

T = FieldType

_SCHEMA_LIST: List[EntitySchema] = [
    EntitySchema(
        entity_type="contact",
        label="Contact",
        label_plural="Contacts",
        icon="Users",
        color="#0ea5e9",
        fields=(
            _f("name", "Full Name", T.TEXT, required=True, section="basic"),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f("company", "Company", T.TEXT, section="basic"),
            _f("role", "Role", T.SELECT, section="basic", options=_opts(
                ("owner", "Owner"), ("manager", "Manager"), ("staff", "Staff"), ("contact", "Contact"),
            )),
            _f("address", "Address", T.ADDRESS, section="location"),
            _f("city", "City", T.TEXT, section="location"),
            _status_field(CONTACT_PIPELINE),
            _f("notes", "Notes", T.TEXTAREA, section="notes"),
        ),
        list_columns=("name", "company", "phone", "status"),
        searchable_fields=("name", "company", "phone", "email"),
    ),
    EntitySchema(
        entity_type="store",
        label="Store",
        label_plural="Stores",
        icon="Store",
        color="#22c55e",
        fields=(
            _f("name", "Store Name", T.TEXT, required=True, section="store_info"),
            _f("address", "Address", T.ADDRESS, section="store_info"),
            _f("city", "City", T.TEXT, section="store_info"),
            _f("state", "State", T.SELECT, section="store_info", options=US_STATES),
            _f("phone", "Phone", T.PHONE, section="store_info"),
            _f("borough", "Borough/Region", T.TEXT, section="store_info"),
            _f("store_type", "Store Type", T.SELECT, section="business_info", options=_opts(
                ("smoke_shop", "Smoke Shop"),
                ("convenience", "Convenience Store"),
                ("bodega", "Bodega"),
                ("distributor", "Distributor"),
            )),
            _status_field(STORE_PIPELINE),
            _f("last_order", "Last Order", T.DATE, section="business_info"),
        ),
        list_columns=("name", "address", "borough", "status", "last_order"),
        searchable_fields=("name", "address", "phone"),
    ),
    EntitySchema(
        entity_type="wholesaler",
        label="Wholesaler",
        label_plural="Wholesalers",
        icon="Warehouse",
        color="#6366f1",
        fields=(
            _f("company_name", "Company Name", T.TEXT, required=True, section="basic"),
            _f("contact_name", "Primary Contact", T.TEXT, section="basic"),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f("state", "State", T.SELECT, section="coverage", options=US_STATES),
            _f("city", "City", T.TEXT, section="coverage"),
            _f("credit_limit", "Credit Limit", T.CURRENCY, section="financial"),
            _f("status", "Status", T.SELECT, section="status", options=_opts(
                ("active", "Active"), ("on_hold", "On Hold"), ("inactive", "Inactive"),
            )),
        ),
        list_columns=("company_name", "contact_name", "state", "status"),
        searchable_fields=("company_name", "contact_name", "city"),
    ),
    EntitySchema(
        entity_type="deal",
        label="Deal",
        label_plural="Deals",
        icon="Handshake",
        color="#f59e0b",
        fields=(
            _f("name", "Deal Name", T.TEXT, required=True, section="basic"),
            _f("contact_name", "Contact", T.TEXT, section="basic"),
            _f("amount", "Amount", T.CURRENCY, section="financial"),
            _f("close_date", "Expected Close", T.DATE, section="financial"),
            _status_field(DEAL_PIPELINE, "Stage"),
            _f("notes", "Notes", T.TEXTAREA, section="notes"),
        ),
        list_columns=("name", "contact_name", "amount", "status"),
        searchable_fields=("name", "contact_name"),
    ),
    EntitySchema(
        entity_type="employee",
        label="Employee",
        label_plural="Employees",
        icon="UserCog",
        color="#14b8a6",
        fields=(
            _f("name", "Full Name", T.TEXT, required=True, section="basic"),
            _f("position", "Position", T.TEXT, section="basic"),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f("hire_date", "Hire Date", T.DATE, section="employment"),
            _f("hourly_rate", "Hourly Rate", T.CURRENCY, section="employment"),
            _f("is_remote", "Remote", T.BOOLEAN, section="employment"),
            _status_field(EMPLOYEE_PIPELINE),
        ),
        list_columns=("name", "position", "hire_date", "status"),
        searchable_fields=("name", "position", "email"),
    ),
    EntitySchema(
        entity_type="campaign",
        label="Campaign",
        label_plural="Campaigns",
        icon="Megaphone",
        color="#8b5cf6",
        fields=(
            _f("name", "Campaign Name", T.TEXT, required=True, section="basic"),
            _f("channel", "Channel", T.SELECT, section="basic", options=_opts(
                ("sms", "SMS"), ("email", "Email"), ("call", "Call"), ("social", "Social"),
            )),
            _f("start_date", "Start Date", T.DATE, section="dates"),
            _f("end_date", "End Date", T.DATE, section="dates"),
            _f("budget", "Budget", T.CURRENCY, section="financial"),
            _status_field(CAMPAIGN_PIPELINE),
        ),
        list_columns=("name", "channel", "start_date", "status"),
        searchable_fields=("name",),
    ),
    EntitySchema(
        entity_type="task",
        label="Task",
        label_plural="Tasks",
        icon="ListTodo",
        color="#64748b",
        fields=(
            _f("label", "Task", T.TEXT, required=True, section="basic"),
            _f("related_to", "Related To", T.TEXT, section="basic"),
            _f("due_date", "Due Date", T.DATE, section="basic"),
            _f("status", "Status", T.SELECT, section="status", options=_opts(
                ("pending", "Pending"), ("completed", "Completed"),
            )),
        ),
        list_columns=("label", "related_to", "due_date", "status"),
        searchable_fields=("label", "related_to"),
    ),
    EntitySchema(
        entity_type="note",
        label="Note",
        label_plural="Notes",
        icon="MessageSquare",
        color="#94a3b8",
        fields=(
            _f("content", "Content", T.TEXTAREA, required=True, section="basic"),
            _f("author", "Author", T.TEXT, section="basic"),
            _f("related_to", "Related To", T.TEXT, section="basic"),
        ),
        list_columns=("content", "author", "related_to"),
        searchable_fields=("content", "author"),
    ),
    EntitySchema(
        entity_type="partner",
        label="Partner",
        label_plural="Partners",
        icon="Building2",
        color="#f59e0b",
        fields=(
            _f("company_name", "Partner Name", T.TEXT, required=True, section="basic"),
            _f("contact_name", "Primary Contact", T.TEXT, section="basic"),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f(
                "partner_category",
                "Partner Category",
                T.SELECT,
                required=True,
                section="category",
                options=PARTNER_CATEGORIES,
                help_text="Select the primary service category this partner offers",
            ),
            _f("state", "State", T.SELECT, required=True, section="coverage", options=US_STATES),
            _f("city", "City", T.TEXT, required=True, section="coverage"),
            _f("service_area", "Service Area (Multi-State)", T.MULTISELECT, section="coverage", options=US_STATES),
            _f("pricing_range", "Pricing Range", T.TEXT, section="pricing"),
            _f("booking_link", "Booking / Affiliate Link", T.URL, section="pricing"),
            _f("commission_rate", "Commission Rate (%)", T.PERCENTAGE, required=True, section="commission"),
            _f("contract_status", "Contract Status", T.SELECT, section="commission", options=CONTRACT_STATUSES),
            _f("contract_start_date", "Contract Start Date", T.DATE, section="commission"),
            _f("contract_end_date", "Contract End Date", T.DATE, section="commission"),
            _f("notes", "Notes", T.TEXTAREA, section="notes"),
        ),
        list_columns=("company_name", "partner_category", "state", "city", "commission_rate", "contract_status"),
        searchable_fields=("company_name", "contact_name", "state", "city"),
    ),
    EntitySchema(
        entity_type="customer",
        label="Customer",
        label_plural="Customers",
        icon="UserCheck",
        color="#10b981",
        fields=(
            _f("name", "Full Name", T.TEXT, required=True, section="basic"),
            _f("phone", "Phone", T.PHONE, required=True, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f("interest_categories", "Interest Categories", T.MULTISELECT, section="preferences", options=PARTNER_CATEGORIES),
            _f("budget_range", "Budget Range", T.SELECT, section="preferences", options=_opts(
                ("under_500", "Under $500"),
                ("500_1000", "$500 - $1,000"),
                ("1000_2500", "$1,000 - $2,500"),
                ("2500_5000", "$2,500 - $5,000"),
                ("5000_10000", "$5,000 - $10,000"),
                ("over_10000", "Over $10,000"),
            )),
            _f("event_date", "Event Date", T.DATE, section="preferences"),
            _f("lead_source", "Lead Source", T.SELECT, section="status", options=_opts(
                ("instagram", "Instagram"),
                ("referral", "Referral"),
                ("google", "Google"),
                ("website", "Website"),
                ("influencer", "Influencer Referral"),
                ("other", "Other"),
            )),
            _f("status", "Status", T.SELECT, section="status", options=_opts(
                ("lead", "Lead"), ("active", "Active"), ("vip", "VIP"),
            )),
        ),
        list_columns=("name", "phone", "interest_categories", "status", "event_date"),
        searchable_fields=("name", "phone", "email"),
    ),
    EntitySchema(
        entity_type="influencer",
        label="Influencer",
        label_plural="Influencers",
        icon="Star",
        color="#ec4899",
        fields=(
            _f("name", "Name", T.TEXT, required=True, section="basic"),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f("platform", "Platform", T.SELECT, section="social", options=_opts(
                ("instagram", "Instagram"), ("tiktok", "TikTok"), ("youtube", "YouTube"), ("twitter", "Twitter/X"),
            )),
            _f("handle", "Handle", T.TEXT, section="social"),
            _f("audience_size", "Audience Size", T.NUMBER, section="social"),
            _f("engagement_rate", "Engagement Rate (%)", T.PERCENTAGE, section="social"),
            _f("promo_code", "Promo Code", T.TEXT, section="commission"),
            _f("commission_rate", "Commission Rate (%)", T.PERCENTAGE, section="commission"),
            _f("payout_method", "Payout Method", T.SELECT, section="commission", options=PAYOUT_METHODS),
        ),
        list_columns=("name", "platform", "handle", "audience_size", "commission_rate"),
        searchable_fields=("name", "handle"),
    ),
    EntitySchema(
        entity_type="booking",
        label="Booking",
        label_plural="Bookings",
        icon="Calendar",
        color="#3b82f6",
        fields=(
            _f("customer_name", "Customer", T.TEXT, required=True, section="basic"),
            _f("event_date", "Event Date", T.DATE, required=True, section="basic"),
            _f("partner_categories", "Package Categories", T.MULTISELECT, section="package", options=PARTNER_CATEGORIES),
            _f("service", "Service Summary", T.TEXT, section="package"),
            _f("total_amount", "Total Amount", T.CURRENCY, section="pricing"),
            _f("deposit_amount", "Deposit", T.CURRENCY, section="pricing"),
            _status_field(BOOKING_PIPELINE),
            _f("notes", "Notes", T.TEXTAREA, section="notes"),
        ),
        list_columns=("customer_name", "event_date", "partner_categories", "total_amount", "status"),
        searchable_fields=("customer_name", "notes"),
    ),
    EntitySchema(
        entity_type="promo_campaign",
        label="Promo Campaign",
        label_plural="Promo Campaigns",
        icon="Megaphone",
        color="#8b5cf6",
        fields=(
            _f("name", "Campaign Name", T.TEXT, required=True, section="basic"),
            _f("description", "Description", T.TEXTAREA, section="basic"),
            _f("promo_category", "Promo Category", T.SELECT, required=True, section="category", options=PARTNER_CATEGORIES),
            _f("start_date", "Start Date", T.DATE, section="dates"),
            _f("end_date", "End Date", T.DATE, section="dates"),
            _f("commission_rate", "Commission Rate (%)", T.PERCENTAGE, section="commission"),
            _status_field(PROMO_CAMPAIGN_PIPELINE),
        ),
        list_columns=("name", "promo_category", "start_date", "end_date", "status"),
        searchable_fields=("name", "description"),
    ),
    EntitySchema(
        entity_type="client",
        label="Client",
        label_plural="Clients",
        icon="User",
        color="#3b82f6",
        fields=(
            _f("legal_name", "Legal Name", T.TEXT, required=True, section="basic"),
            _f("business_name", "Business Name", T.TEXT, section="basic"),
            _f("phone", "Phone", T.PHONE, required=True, section="basic"),
            _f("email", "Email", T.EMAIL, section="basic"),
            _f("funding_goal", "Funding Goal", T.CURRENCY, section="funding"),
            _f("assigned_case_manager", "Case Manager", T.TEXT, section="funding"),
            _f("next_follow_up_date", "Next Follow-Up", T.DATE, section="funding"),
            _f("status", "Status", T.SELECT, section="status", options=_opts(
                ("intake", "Intake"),
                ("docs_pending", "Docs Pending"),
                ("submitted", "Submitted"),
                ("approved", "Approved"),
                ("funded", "Funded"),
                ("declined", "Declined"),
            )),
        ),
        list_columns=("legal_name", "business_name", "phone", "status", "next_follow_up_date"),
        searchable_fields=("legal_name", "business_name", "phone", "email"),
    ),
    EntitySchema(
        entity_type="funding_application",
        label="Application",
        label_plural="Applications",
        icon="FileText",
        color="#10b981",
        fields=(
            _f("client_name", "Client", T.TEXT, required=True, section="basic"),
            _f("amount_requested", "Amount Requested", T.CURRENCY, required=True, section="basic"),
            _f("lender", "Lender", T.TEXT, section="basic"),
            _f("offer_amount", "Offer Amount", T.CURRENCY, section="offer"),
            _status_field(FUNDING_APPLICATION_PIPELINE),
        ),
        list_columns=("client_name", "amount_requested", "status", "lender"),
        searchable_fields=("client_name", "lender"),
    ),
    EntitySchema(
        entity_type="vendor",
        label="Vendor",
        label_plural="Vendors",
        icon="Building",
        color="#8b5cf6",
        fields=(
            _f("name", "Vendor Name", T.TEXT, required=True, section="basic"),
            _f("category", "Category", T.SELECT, section="basic", options=_opts(
                ("event_hall", "Event Hall"),
                ("rental_company", "Rental Company"),
                ("party_items_supplier", "Party Items Supplier"),
                ("staff_vendor", "Staff Vendor"),
            )),
            _f("contact_name", "Contact", T.TEXT, section="basic"),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("city", "City", T.TEXT, section="location"),
            _f("state", "State", T.SELECT, section="location", options=US_STATES),
            _f("availability", "Availability", T.TEXT, section="work"),
            _f("rating", "Rating", T.NUMBER, section="work"),
        ),
        list_columns=("name", "category", "city", "availability", "rating"),
        searchable_fields=("name", "city"),
    ),
    EntitySchema(
        entity_type="staff",
        label="Staff Member",
        label_plural="Staff",
        icon="UserCog",
        color="#f59e0b",
        fields=(
            _f("name", "Name", T.TEXT, required=True, section="basic"),
            _f("role", "Role", T.SELECT, section="basic", options=_opts(
                ("server", "Server"),
                ("bartender", "Bartender"),
                ("dj", "DJ"),
                ("photographer", "Photographer"),
                ("videographer", "Videographer"),
                ("coordinator", "Coordinator"),
                ("security", "Security"),
            )),
            _f("phone", "Phone", T.PHONE, section="basic"),
            _f("availability", "Availability", T.TEXT, section="work"),
            _f("rate", "Hourly Rate", T.CURRENCY, section="work"),
        ),
        list_columns=("name", "role", "phone", "availability", "rate"),
        searchable_fields=("name", "phone"),
    ),
    EntitySchema(
        entity_type="event_booking",
        label="Event Booking",
        label_plural="Event Bookings",
        icon="Calendar",
        color="#10b981",
        fields=(
            _f("client_name", "Client", T.TEXT, required=True, section="basic"),
            _f("event_type", "Event Type", T.SELECT, section="basic", options=_opts(
                ("birthday", "Birthday Party"),
                ("wedding", "Wedding"),
                ("corporate", "Corporate Event"),
                ("baby_shower", "Baby Shower"),
                ("graduation", "Graduation"),
                ("other", "Other"),
            )),
            _f("event_date", "Event Date", T.DATE, required=True, section="basic"),
            _f("guest_count", "Guest Count", T.NUMBER, section="details"),
            _f("total_amount", "Total Amount", T.CURRENCY, section="pricing"),
            _status_field(EVENT_BOOKING_PIPELINE),
        ),
        list_columns=("client_name", "event_type", "event_date", "guest_count", "status"),
        searchable_fields=("client_name", "event_type"),
    ),
    EntitySchema(
        entity_type="model",
        label="Model",
        label_plural="Models",
        icon="Star",
        color="#ec4899",
        fields=(
            _f("stage_name", "Stage Name", T.TEXT, required=True, section="basic"),
            _f("country", "Country", T.TEXT, section="location"),
            _f("city", "City", T.TEXT, section="location"),
            _f("whatsapp_number", "WhatsApp Number", T.PHONE, required=True, section="contact"),
            _f("social_handles", "Social Handles", T.JSON, section="contact", help_text="Instagram, Twitter, etc."),
            _f("verification_status", "Verification Status", T.SELECT, section="status", options=_opts(
                ("pending", "Pending"), ("verified", "Verified"), ("rejected", "Rejected"),
            )),
            _status_field(MODEL_PIPELINE, "Lifecycle Status"),
            _f("payout_method", "Payout Method", T.SELECT, section="financial", options=PAYOUT_METHODS),
        ),
        list_columns=("stage_name", "country", "city", "status", "verification_status"),
        searchable_fields=("stage_name", "country", "city"),
    ),
    EntitySchema(
        entity_type="collab",
        label="Collaboration",
        label_plural="Collaborations",
        icon="Briefcase",
        color="#8b5cf6",
        fields=(
            _f("model_name", "Model", T.TEXT, required=True, section="basic"),
            _f("type", "Collaboration Type", T.SELECT, section="basic", options=_opts(
                ("content", "Content Creation"),
                ("promo", "Promotion"),
                ("exclusive", "Exclusive Contract"),
                ("one_time", "One-Time"),
            )),
            _f("start_date", "Start Date", T.DATE, section="dates"),
            _f("end_date", "End Date", T.DATE, section="dates"),
            _f("revenue", "Revenue", T.CURRENCY, section="financial"),
            _f("status", "Status", T.SELECT, section="status", options=_opts(
                ("pending", "Pending"), ("active", "Active"), ("completed", "Completed"), ("cancelled", "Cancelled"),
            )),
        ),
        list_columns=("model_name", "type", "start_date", "status", "revenue"),
        searchable_fields=("model_name", "type"),
    ),
]

ENTITY_SCHEMAS: Mapping[str, EntitySchema] = {schema.entity_type: schema for schema in _SCHEMA_LIST}


def get_entity_schema(entity_type: str) -> EntitySchema | None:
    if not isinstance(entity_type, str):
        return None
    return ENTITY_SCHEMAS.get(entity_type)


def get_pipeline(entity_type: str) -> Tuple[PipelineStage, ...]:
    if not isinstance(entity_type, str):
        return ()
    return PIPELINES.get(entity_type, ())


def stage_index(stages: Tuple[PipelineStage, ...] | List[PipelineStage], status: Any) -> int | None:
    if not isinstance(status, str) or not status:
        return None
    for idx, stage in enumerate(stages):
        if stage.value == status:
            return idx
    return None


def humanize_key(key: str) -> str:
    """``next_follow_up_date`` -> ``Next Follow Up Date``."""
    words = [w for w in str(key).replace("-", "_").split("_") if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)


def validate_registry(
    schemas: Mapping[str, EntitySchema] | None = None,
    pipelines: Mapping[str, Tuple[PipelineStage, ...]] | None = None,
) -> list[Issue]:
    schemas = ENTITY_SCHEMAS if schemas is None else schemas
    pipelines = PIPELINES if pipelines is None else pipelines
    issues: list[Issue] = []

    for key, schema in schemas.items():
        if schema.entity_type != key:
            issues.append(_issue("SCHEMA_KEY_MISMATCH", "schema entity_type must match registry key", f"$.{key}.entity_type"))
        seen: set[str] = set()
        for idx, fd in enumerate(schema.fields):
            if fd.key in seen:
                issues.append(_issue("FIELD_KEY_DUPLICATE", f"duplicate field key: {fd.key}", f"$.{key}.fields[{idx}]"))
            seen.add(fd.key)
        for attr in ("list_columns", "searchable_fields"):
            for col in getattr(schema, attr):
                if col not in seen:
                    issues.append(_issue("COLUMN_UNKNOWN", f"{attr} names unknown field: {col}", f"$.{key}.{attr}"))

    for key, stages in pipelines.items():
        values = [s.value for s in stages]
        if len(set(values)) != len(values):
            issues.append(_issue("STAGE_VALUE_DUPLICATE", "stage values must be unique", f"$.pipelines.{key}"))
        schema = schemas.get(key)
        if schema is None:
            issues.append(_issue("PIPELINE_UNKNOWN_ENTITY", f"pipeline for unknown entity type: {key}", f"$.pipelines.{key}"))
            continue
        status = schema.status_field()
        domain = status.option_values() if status else []
        if domain != values:
            issues.append(
                _issue(
                    "STATUS_DOMAIN_MISMATCH",
                    "status options must equal pipeline stage values",
                    f"$.{key}.status",
                    {"status_options": domain, "stages": values},
                )
            )
    return issues


def field_to_dict(fd: FieldDescriptor) -> dict:
    return {
        "key": fd.key,
        "label": fd.label,
        "type": fd.type.value,
        "required": fd.required,
        "section": fd.section,
        "options": [{"value": o.value, "label": o.label} for o in fd.options],
        "help_text": fd.help_text,
    }


def schema_to_dict(schema: EntitySchema) -> dict:
    return {
        "entity_type": schema.entity_type,
        "label": schema.label,
        "label_plural": schema.label_plural,
        "icon": schema.icon,
        "color": schema.color,
        "fields": [field_to_dict(fd) for fd in schema.fields],
        "list_columns": list(schema.list_columns),
        "searchable_fields": list(schema.searchable_fields),
    }


def pipeline_to_list(stages: Tuple[PipelineStage, ...]) -> list[dict]:
    return [{"value": s.value, "label": s.label, "color": s.color} for s in stages]
