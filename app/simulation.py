"""Demo rows per tenant business, served when simulation mode is on."""

from __future__ import annotations

import copy
from typing import Dict, List

from blueprint_resolver import Blueprint

TOPTIER_SIMULATION = {
    "partner": [
        {"id": "p1", "company_name": "Luxury Wheels NYC", "contact_name": "Marcus Johnson", "phone": "212-555-0101", "email": "marcus@luxurywheels.com", "partner_category": "exotic_rental_car_promo", "state": "NY", "city": "New York", "commission_rate": 15, "contract_status": "active"},
        {"id": "p2", "company_name": "Elite Helicopters", "contact_name": "Sarah Chen", "phone": "305-555-0102", "email": "sarah@elitehelicopters.com", "partner_category": "helicopter_promo", "state": "FL", "city": "Miami", "commission_rate": 12, "contract_status": "active"},
        {"id": "p3", "company_name": "Dream Decor Studio", "contact_name": "Isabella Rodriguez", "phone": "213-555-0103", "email": "isabella@dreamdecor.com", "partner_category": "room_decor_promo", "state": "CA", "city": "Los Angeles", "commission_rate": 18, "contract_status": "active"},
        {"id": "p4", "company_name": "Yacht Life Charters", "contact_name": "Michael Williams", "phone": "954-555-0104", "email": "michael@yachtlife.com", "partner_category": "yachts", "state": "FL", "city": "Fort Lauderdale", "commission_rate": 10, "contract_status": "active"},
        {"id": "p5", "company_name": "Black Truck VIP", "contact_name": "David Thompson", "phone": "404-555-0105", "email": "david@blacktruckvip.com", "partner_category": "black_trucks_promo", "state": "GA", "city": "Atlanta", "commission_rate": 20, "contract_status": "pending"},
    ],
    "customer": [
        {"id": "c1", "name": "Jennifer Martinez", "phone": "917-555-1001", "email": "jennifer@email.com", "interest_categories": ["exotic_rental_car_promo", "room_decor_promo"], "budget_range": "5000_10000", "status": "vip", "event_date": "2024-03-15"},
        {"id": "c2", "name": "Robert Kim", "phone": "646-555-1002", "email": "robert.kim@email.com", "interest_categories": ["yachts", "helicopter_promo"], "budget_range": "over_10000", "status": "active", "event_date": "2024-04-20"},
        {"id": "c3", "name": "Amanda Foster", "phone": "347-555-1003", "email": "amanda.f@email.com", "interest_categories": ["club_lounge_package"], "budget_range": "2500_5000", "status": "lead", "event_date": "2024-02-28"},
        {"id": "c4", "name": "Christopher Lee", "phone": "718-555-1004", "email": "chris.lee@email.com", "interest_categories": ["sprinter_van_promo", "security_promo"], "budget_range": "1000_2500", "status": "active", "event_date": "2024-03-08"},
    ],
    "influencer": [
        {"id": "i1", "name": "Sophia Rivera", "handle": "@sophialuxury", "platform": "instagram", "audience_size": 850000, "engagement_rate": 4.2, "promo_code": "SOPHIA20", "commission_rate": 15},
        {"id": "i2", "name": "Marcus Bennett", "handle": "@marcuslives", "platform": "tiktok", "audience_size": 1200000, "engagement_rate": 6.8, "promo_code": "MARCUS15", "commission_rate": 12},
        {"id": "i3", "name": "Aria Johnson", "handle": "@ariaexperiences", "platform": "youtube", "audience_size": 450000, "engagement_rate": 3.5, "promo_code": "ARIA25", "commission_rate": 18},
    ],
    "booking": [
        {"id": "b1", "customer_name": "Jennifer Martinez", "service": "Exotic Car + Room Decor", "event_date": "2024-03-15", "status": "confirmed", "total_amount": 8500},
        {"id": "b2", "customer_name": "Robert Kim", "service": "Yacht Charter + Helicopter", "event_date": "2024-04-20", "status": "deposit_paid", "total_amount": 25000},
        {"id": "b3", "customer_name": "Amanda Foster", "service": "Club Package", "event_date": "2024-02-28", "status": "quote_sent", "total_amount": 3500},
    ],
}

FUNDING_SIMULATION = {
    "client": [
        {"id": "cl1", "legal_name": "John Smith", "business_name": "Smith Construction LLC", "phone": "555-0201", "email": "john@smithconstruction.com", "funding_goal": 150000, "status": "docs_pending", "next_follow_up_date": "2024-02-20", "assigned_case_manager": "Maria Garcia"},
        {"id": "cl2", "legal_name": "Sarah Johnson", "business_name": "JJ Logistics Inc", "phone": "555-0202", "email": "sarah@jjlogistics.com", "funding_goal": 250000, "status": "submitted", "next_follow_up_date": "2024-02-18", "assigned_case_manager": "Carlos Rodriguez"},
        {"id": "cl3", "legal_name": "Michael Brown", "business_name": "Brown Auto Sales", "phone": "555-0203", "email": "mike@brownauto.com", "funding_goal": 75000, "status": "approved", "next_follow_up_date": "2024-02-22", "assigned_case_manager": "Maria Garcia"},
        {"id": "cl4", "legal_name": "Lisa Davis", "business_name": "Davis Restaurant Group", "phone": "555-0204", "email": "lisa@davisrestaurants.com", "funding_goal": 500000, "status": "intake", "next_follow_up_date": "2024-02-19", "assigned_case_manager": "James Wilson"},
        {"id": "cl5", "legal_name": "Robert Wilson", "business_name": "Wilson Medical Supplies", "phone": "555-0205", "email": "rwilson@medsupply.com", "funding_goal": 180000, "status": "funded", "next_follow_up_date": None, "assigned_case_manager": "Carlos Rodriguez"},
    ],
    "funding_application": [
        {"id": "app1", "client_name": "Smith Construction LLC", "amount_requested": 150000, "status": "document_collection", "lender": "First National", "created_at": "2024-02-10"},
        {"id": "app2", "client_name": "JJ Logistics Inc", "amount_requested": 250000, "status": "submission", "lender": "Capital Finance", "created_at": "2024-02-05"},
        {"id": "app3", "client_name": "Brown Auto Sales", "amount_requested": 75000, "status": "offers_received", "lender": "Quick Fund", "offer_amount": 68000, "created_at": "2024-01-28"},
        {"id": "app4", "client_name": "Wilson Medical Supplies", "amount_requested": 180000, "status": "funded", "lender": "Healthcare Capital", "offer_amount": 175000, "created_at": "2024-01-15"},
    ],
    "task": [
        {"id": "t1", "related_to": "Smith Construction LLC", "label": "Request bank statements", "status": "pending", "due_date": "2024-02-20"},
        {"id": "t2", "related_to": "Smith Construction LLC", "label": "Verify business registration", "status": "completed", "due_date": "2024-02-15"},
        {"id": "t3", "related_to": "JJ Logistics Inc", "label": "Follow up with lender", "status": "pending", "due_date": "2024-02-18"},
        {"id": "t4", "related_to": "Davis Restaurant Group", "label": "Request ID", "status": "pending", "due_date": "2024-02-19"},
    ],
}

UNFORGETTABLE_SIMULATION = {
    "vendor": [
        {"id": "v1", "name": "Grand Ballroom NYC", "category": "event_hall", "contact_name": "Patricia Moore", "phone": "212-555-3001", "city": "New York", "state": "NY", "availability": "Weekends", "rating": 4.8},
        {"id": "v2", "name": "Elite Party Rentals", "category": "rental_company", "contact_name": "Kevin Thomas", "phone": "718-555-3002", "city": "Brooklyn", "state": "NY", "availability": "Daily", "rating": 4.5},
        {"id": "v3", "name": "Celebration Supplies Co", "category": "party_items_supplier", "contact_name": "Diana Ross", "phone": "347-555-3003", "city": "Queens", "state": "NY", "availability": "Daily", "rating": 4.7},
        {"id": "v4", "name": "Premium Staff Solutions", "category": "staff_vendor", "contact_name": "Anthony Garcia", "phone": "646-555-3004", "city": "Manhattan", "state": "NY", "availability": "On demand", "rating": 4.9},
        {"id": "v5", "name": "Skyline Rooftop Venue", "category": "event_hall", "contact_name": "Rachel Green", "phone": "212-555-3005", "city": "New York", "state": "NY", "availability": "Thu-Sun", "rating": 4.6},
    ],
    "staff": [
        {"id": "s1", "name": "Carlos Mendez", "role": "server", "phone": "917-555-4001", "availability": "Weekends", "rate": 25},
        {"id": "s2", "name": "Emily Watson", "role": "bartender", "phone": "347-555-4002", "availability": "Fri-Sun", "rate": 35},
        {"id": "s3", "name": "DJ Mike", "role": "dj", "phone": "646-555-4003", "availability": "Weekends", "rate": 150},
        {"id": "s4", "name": "James Photography", "role": "photographer", "phone": "718-555-4004", "availability": "By booking", "rate": 200},
        {"id": "s5", "name": "Security Team Alpha", "role": "security", "phone": "212-555-4005", "availability": "On demand", "rate": 50},
    ],
    "event_booking": [
        {"id": "e1", "client_name": "Martinez Family", "event_type": "birthday", "event_date": "2024-03-15", "guest_count": 150, "status": "vendor_assigned", "total_amount": 15000},
        {"id": "e2", "client_name": "Johnson Wedding", "event_type": "wedding", "event_date": "2024-04-22", "guest_count": 200, "status": "deposit_paid", "total_amount": 45000},
        {"id": "e3", "client_name": "Tech Corp Annual", "event_type": "corporate", "event_date": "2024-03-08", "guest_count": 100, "status": "event_scheduled", "total_amount": 25000},
        {"id": "e4", "client_name": "Baby Chen Shower", "event_type": "baby_shower", "event_date": "2024-02-28", "guest_count": 50, "status": "quote_sent", "total_amount": 5000},
    ],
}

PLAYBOXXX_SIMULATION = {
    "model": [
        {"id": "m1", "stage_name": "Luna Star", "country": "United States", "city": "Miami", "whatsapp_number": "+1-305-555-5001", "status": "active", "verification_status": "verified"},
        {"id": "m2", "stage_name": "Valentina Rose", "country": "Brazil", "city": "São Paulo", "whatsapp_number": "+55-11-555-5002", "status": "featured", "verification_status": "verified"},
        {"id": "m3", "stage_name": "Mia Noir", "country": "France", "city": "Paris", "whatsapp_number": "+33-1-555-5003", "status": "active", "verification_status": "verified"},
        {"id": "m4", "stage_name": "Natasha Crystal", "country": "Russia", "city": "Moscow", "whatsapp_number": "+7-495-555-5004", "status": "onboarded", "verification_status": "pending"},
        {"id": "m5", "stage_name": "Sofia Angel", "country": "Colombia", "city": "Medellín", "whatsapp_number": "+57-4-555-5005", "status": "new_lead", "verification_status": "pending"},
    ],
    "collab": [
        {"id": "col1", "model_name": "Luna Star", "type": "content", "start_date": "2024-02-01", "status": "active", "revenue": 5000},
        {"id": "col2", "model_name": "Valentina Rose", "type": "exclusive", "start_date": "2024-01-15", "status": "active", "revenue": 15000},
        {"id": "col3", "model_name": "Mia Noir", "type": "promo", "start_date": "2024-02-10", "status": "pending", "revenue": 0},
    ],
}

GENERAL_SIMULATION = {
    "contact": [
        {"id": "ct1", "name": "Alicia Gomez", "company": "Corner Smoke Shop", "phone": "718-555-6001", "email": "alicia@cornersmoke.com", "role": "owner", "city": "Bronx", "status": "qualified"},
        {"id": "ct2", "name": "Derek Shaw", "company": "Shaw Distributors", "phone": "201-555-6002", "role": "manager", "city": "Newark", "status": "new"},
        {"id": "ct3", "name": "Priya Patel", "company": "Patel Market", "phone": "516-555-6003", "email": "priya@patelmarket.com", "role": "owner", "city": "Hempstead", "status": "won"},
    ],
    "store": [
        {"id": "st1", "name": "Corner Smoke Shop", "address": "1200 Grand Concourse", "city": "Bronx", "state": "NY", "borough": "Bronx", "store_type": "smoke_shop", "status": "active", "last_order": "2024-02-12"},
        {"id": "st2", "name": "Patel Market", "address": "45 Front St", "city": "Hempstead", "state": "NY", "borough": "Long Island", "store_type": "convenience", "status": "prospect"},
    ],
    "deal": [
        {"id": "d1", "name": "Shaw Q2 restock", "contact_name": "Derek Shaw", "amount": 12000, "close_date": "2024-04-01", "status": "proposal"},
    ],
    "task": [
        {"id": "gt1", "label": "Call Derek about samples", "related_to": "Shaw Distributors", "due_date": "2024-02-21", "status": "pending"},
    ],
}

SIMULATION_DATA: Dict[str, Dict[str, List[dict]]] = {
    "toptier": TOPTIER_SIMULATION,
    "funding": FUNDING_SIMULATION,
    "unforgettable": UNFORGETTABLE_SIMULATION,
    "playboxxx": PLAYBOXXX_SIMULATION,
    "default": GENERAL_SIMULATION,
}


def simulation_dataset(blueprint: Blueprint) -> Dict[str, List[dict]]:
    """Demo rows for the blueprint's business, restricted to enabled entity types."""
    data = SIMULATION_DATA.get(blueprint.business_id, {})
    return {
        entity_type: copy.deepcopy(rows)
        for entity_type, rows in data.items()
        if blueprint.is_enabled(entity_type)
    }


def simulation_rows(blueprint: Blueprint, entity_type: str) -> List[dict]:
    if not blueprint.is_enabled(entity_type):
        return []
    rows = SIMULATION_DATA.get(blueprint.business_id, {}).get(entity_type, [])
    return copy.deepcopy(rows)


def simulation_counts(blueprint: Blueprint) -> Dict[str, int]:
    data = SIMULATION_DATA.get(blueprint.business_id, {})
    return {entity_type: len(data.get(entity_type, [])) for entity_type in blueprint.enabled_entity_types}
