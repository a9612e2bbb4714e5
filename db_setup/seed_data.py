"""
Seed records for a fresh database.

Mirrors the reference rows the back-office team works against in
development: IRDAI motor zones, NCB and depreciation slabs, states and
pincodes, business lookups, a month of commission payouts, a retention
sample and the LMS catalogue.
"""

SEED_TIMESTAMP = "2024-01-15T10:30:00Z"

ZONES = [
    # (motor_segment_id, zone_name, zone_description)
    ("1", "Zone A", "Private vehicle zone A - Metropolitan cities and high-density areas"),
    ("1", "Zone B", "Private vehicle zone B - Tier 2 cities and suburban areas"),
    ("2", "Zone A", "Commercial vehicle zone A - Heavy traffic metropolitan areas"),
    ("2", "Zone B", "Commercial vehicle zone B - Moderate traffic urban areas"),
    ("2", "Zone C", "Commercial vehicle zone C - Rural and low traffic areas"),
]

NCB_SLABS = [
    # (ncb_slab_id, from_years, to_years, rate, description)
    ("NCB001", 0, 0, 0, "No claim bonus for new policies"),
    ("NCB002", 1, 1, 20, "20% NCB for 1 year claim-free"),
    ("NCB003", 2, 2, 25, "25% NCB for 2 years claim-free"),
    ("NCB004", 3, 3, 35, "35% NCB for 3 years claim-free"),
    ("NCB005", 4, 4, 45, "45% NCB for 4 years claim-free"),
    ("NCB006", 5, 99, 50, "50% NCB for 5+ years claim-free"),
]

DEPRECIATION_SLABS = [
    # (depreciation_slab_id, from_years, to_years, rate, description)
    ("DS001", 0, 1, 0, "No depreciation for new vehicles (0-1 year)"),
    ("DS002", 1, 2, 5, "5% depreciation for 1-2 year old vehicles"),
    ("DS003", 2, 3, 10, "10% depreciation for 2-3 year old vehicles"),
    ("DS004", 3, 4, 15, "15% depreciation for 3-4 year old vehicles"),
    ("DS005", 4, 5, 20, "20% depreciation for 4-5 year old vehicles"),
]

STATES = [
    # (name, code, country_id)
    ("Andhra Pradesh", "AP", "1"),
    ("Arunachal Pradesh", "AR", "1"),
    ("Assam", "AS", "1"),
    ("Bihar", "BR", "1"),
    ("Chhattisgarh", "CG", "1"),
    ("Delhi", "DL", "1"),
    ("Goa", "GA", "1"),
    ("Gujarat", "GJ", "1"),
    ("Haryana", "HR", "1"),
    ("Himachal Pradesh", "HP", "1"),
    ("Jammu and Kashmir", "JK", "1"),
    ("Jharkhand", "JH", "1"),
    ("Karnataka", "KA", "1"),
    ("Kerala", "KL", "1"),
    ("Madhya Pradesh", "MP", "1"),
    ("Maharashtra", "MH", "1"),
    ("Manipur", "MN", "1"),
    ("Meghalaya", "ML", "1"),
    ("Mizoram", "MZ", "1"),
    ("Nagaland", "NL", "1"),
    ("Odisha", "OR", "1"),
    ("Punjab", "PB", "1"),
    ("Rajasthan", "RJ", "1"),
    ("Sikkim", "SK", "1"),
    ("Tamil Nadu", "TN", "1"),
    ("Telangana", "TG", "1"),
    ("Tripura", "TR", "1"),
    ("Uttar Pradesh", "UP", "1"),
    ("Uttarakhand", "UK", "1"),
    ("West Bengal", "WB", "1"),
    ("Alabama", "AL", "2"),
    ("Alaska", "AK", "2"),
    ("Arizona", "AZ", "2"),
    ("California", "CA", "2"),
    ("Florida", "FL", "2"),
    ("New York", "NY", "2"),
    ("Texas", "TX", "2"),
    ("England", "ENG", "3"),
    ("Scotland", "SCT", "3"),
    ("Wales", "WLS", "3"),
    ("Northern Ireland", "NIR", "3"),
    ("Ontario", "ON", "4"),
    ("Quebec", "QC", "4"),
    ("British Columbia", "BC", "4"),
    ("New South Wales", "NSW", "5"),
    ("Victoria", "VIC", "5"),
    ("Queensland", "QLD", "5"),
    ("Bavaria", "BY", "6"),
    ("North Rhine-Westphalia", "NW", "6"),
    ("Baden-Württemberg", "BW", "6"),
    ("Île-de-France", "IDF", "7"),
    ("Tokyo", "TK", "8"),
    ("Osaka", "OS", "8"),
    ("Kyoto", "KY", "8"),
    ("Beijing", "BJ", "9"),
    ("Shanghai", "SH", "9"),
    ("Guangdong", "GD", "9"),
    ("Dubai", "DU", "10"),
    ("Abu Dhabi", "AD", "10"),
    ("Riyadh", "RY", "11"),
    ("Mecca", "MK", "11"),
    ("Singapore", "SG", "12"),
    ("Kuala Lumpur", "KL", "13"),
    ("Selangor", "SL", "13"),
]

PINCODES = [
    # (pincode, city_id, area)
    ("400001", "1", "Fort"),
    ("400002", "1", "CST"),
    ("400003", "1", "Marine Lines"),
    ("411001", "2", "Pune Station"),
    ("411002", "2", "Shivajinagar"),
    ("110001", "3", "Connaught Place"),
    ("110002", "3", "Rajiv Chowk"),
    ("560001", "4", "Bangalore GPO"),
    ("560002", "4", "MG Road"),
    ("600001", "5", "Chennai GPO"),
    ("380001", "6", "Ahmedabad GPO"),
    ("700001", "7", "Kolkata GPO"),
    ("226001", "8", "Lucknow GPO"),
    ("302001", "9", "Jaipur GPO"),
    ("160001", "10", "Chandigarh GPO"),
    ("90001", "11", "Downtown LA"),
    ("90002", "11", "East LA"),
    ("10001", "12", "Manhattan"),
    ("10002", "12", "Lower East Side"),
    ("77001", "13", "Downtown Houston"),
    ("SW1A 1AA", "14", "Westminster"),
    ("SW1A 2AA", "14", "Westminster"),
    ("M1 1AA", "15", "Manchester City Centre"),
    ("M1A 1A1", "16", "Downtown Toronto"),
    ("H1A 1A1", "17", "Downtown Montreal"),
    ("2000", "18", "Sydney CBD"),
    ("3000", "19", "Melbourne CBD"),
]

BUSINESS_ENTITIES = {
    # category -> [(name, code, description)]
    "agent-types": [
        ("PoSP", "POSP", "Point of Sales Person"),
        ("MISP", "MISP", "Micro Insurance Sales Person"),
        ("Agent", "AGENT", "General Insurance Agent"),
        ("PoSP – Motor", "POSP_MOTOR", "Point of Sales Person - Motor Insurance"),
        ("PoSP – Health", "POSP_HEALTH", "Point of Sales Person - Health Insurance"),
        ("PoSP – Life", "POSP_LIFE", "Point of Sales Person - Life Insurance"),
    ],
    "policy-types": [
        ("Life Insurance", "LIFE", "Life insurance policies"),
        ("Health Insurance", "HEALTH", "Health insurance policies"),
        ("Motor Insurance", "MOTOR", "Motor vehicle insurance policies"),
        ("General Insurance", "GENERAL", "General insurance policies"),
    ],
    "user-types": [
        ("Admin", "ADMIN", "System Administrator"),
        ("Manager", "MANAGER", "Branch Manager"),
        ("Agent", "AGENT", "Insurance Agent"),
        ("Customer", "CUSTOMER", "End Customer"),
    ],
    "regions": [
        ("North", "NORTH", "Northern Region"),
        ("South", "SOUTH", "Southern Region"),
        ("East", "EAST", "Eastern Region"),
        ("West", "WEST", "Western Region"),
    ],
    "departments": [
        ("Sales", "SALES", "Sales Department"),
        ("Operations", "OPS", "Operations Department"),
        ("Claims", "CLAIMS", "Claims Department"),
        ("HR", "HR", "Human Resources Department"),
    ],
    "statuses": [
        ("Active", "ACTIVE", "Active status"),
        ("Inactive", "INACTIVE", "Inactive status"),
        ("Pending", "PENDING", "Pending status"),
        ("Completed", "COMPLETED", "Completed status"),
    ],
    "priorities": [
        ("Low", "LOW", "Low priority"),
        ("Medium", "MEDIUM", "Medium priority"),
        ("High", "HIGH", "High priority"),
        ("Critical", "CRITICAL", "Critical priority"),
    ],
}

COMMISSION_PAYOUTS = [
    # (agent_name, product, region, premium, commission_rate, commission, payout_date, status, policy_count, month)
    ("Rajesh Kumar", "Life Insurance", "Mumbai", 2500000, 5.0, 125000, "2024-01-15", "paid", 45, "January 2024"),
    ("Priya Sharma", "Health Insurance", "Bangalore", 1800000, 5.0, 90000, "2024-01-15", "paid", 38, "January 2024"),
    ("Amit Patel", "Motor Insurance", "Delhi", 1200000, 5.0, 60000, "2024-01-15", "paid", 42, "January 2024"),
    ("Sneha Gupta", "Life Insurance", "Chennai", 2200000, 5.0, 110000, "2024-01-14", "paid", 35, "January 2024"),
    ("Vikram Singh", "Health Insurance", "Pune", 1500000, 5.0, 75000, "2024-01-14", "pending", 28, "January 2024"),
    ("Anita Desai", "Motor Insurance", "Hyderabad", 950000, 5.0, 47500, "2024-01-13", "paid", 31, "January 2024"),
    ("Rohit Verma", "Life Insurance", "Kolkata", 2800000, 5.0, 140000, "2024-01-13", "paid", 52, "January 2024"),
    ("Kavita Joshi", "Health Insurance", "Ahmedabad", 1650000, 5.0, 82500, "2024-01-12", "overdue", 33, "January 2024"),
]

RETENTION_RECORDS = [
    # (customer_name, agent_name, policy_type, join_date, last_renewal_date, status, region, premium, retention_rate, years_with_company)
    ("Rajesh Kumar", "Amit Patel", "Life Insurance", "2020-01-15", "2024-01-15", "active", "Mumbai", 50000, 95, 4),
    ("Priya Sharma", "Sneha Gupta", "Health Insurance", "2021-03-20", "2024-03-20", "renewed", "Bangalore", 35000, 88, 3),
    ("Amit Patel", "Vikram Singh", "Motor Insurance", "2019-06-10", "2023-06-10", "lapsed", "Delhi", 25000, 75, 5),
    ("Sneha Gupta", "Anita Desai", "Life Insurance", "2022-04-05", "2024-04-05", "active", "Chennai", 60000, 92, 2),
    ("Vikram Singh", "Rohit Verma", "Health Insurance", "2020-08-12", "2024-08-12", "renewed", "Pune", 40000, 90, 4),
    ("Anita Desai", "Kavita Joshi", "Motor Insurance", "2021-11-18", "2023-11-18", "cancelled", "Hyderabad", 30000, 60, 3),
    ("Rohit Verma", "Rajesh Kumar", "Life Insurance", "2018-09-25", "2024-09-25", "active", "Kolkata", 75000, 98, 6),
    ("Kavita Joshi", "Priya Sharma", "Health Insurance", "2023-02-28", "2024-02-28", "renewed", "Ahmedabad", 45000, 85, 1),
]

TRAINING_MODULES = [
    {
        "agent_type_id": "1",
        "policy_type_ids": ["1", "2", "3"],
        "module_name": "Life Insurance Fundamentals",
        "topics": [
            {"name": "Introduction to Life Insurance", "duration": 2.0},
            {"name": "Types of Life Insurance Policies", "duration": 3.0},
            {"name": "Premium Calculation", "duration": 2.5},
            {"name": "Claims Process", "duration": 1.5},
        ],
        "validity_from": "2024-01-01",
        "validity_to": "2024-12-31",
    },
    {
        "agent_type_id": "2",
        "policy_type_ids": ["5", "8", "9"],
        "module_name": "General Insurance Basics",
        "topics": [
            {"name": "Overview of General Insurance", "duration": 1.5},
            {"name": "Motor Insurance Products", "duration": 2.0},
            {"name": "Property Insurance", "duration": 2.0},
            {"name": "Risk Assessment", "duration": 1.5},
        ],
        "validity_from": "2024-01-01",
        "validity_to": "2024-12-31",
    },
    {
        "agent_type_id": "3",
        "policy_type_ids": ["6", "7"],
        "module_name": "Health Insurance Specialization",
        "topics": [
            {"name": "Health Insurance Products", "duration": 2.5},
            {"name": "Medical Terminology", "duration": 1.5},
            {"name": "Claims and Reimbursement", "duration": 2.0},
            {"name": "Network Hospitals", "duration": 1.0},
        ],
        "validity_from": "2024-01-01",
        "validity_to": "2024-12-31",
    },
]

ISSUED_CERTIFICATES = [
    # (agent_id, agent_name, agent_type, exam_name, policy_type, score, percentage,
    #  issued_date, expiry_date, certificate_number, status, download_count, last_downloaded)
    ("AG001", "John Smith", "PoSP", "Life Insurance Fundamentals Exam", "Life Insurance", 85, 85,
     "2024-01-15", "2025-01-15", "CERT-2024-001", "ACTIVE", 3, "2024-01-20"),
    ("AG002", "Sarah Johnson", "MISP", "Motor Insurance Advanced Exam", "Motor Insurance", 92, 92,
     "2024-01-10", "2025-01-10", "CERT-2024-002", "ACTIVE", 1, "2024-01-10"),
    ("AG003", "Mike Wilson", "Agent", "Health Insurance Specialization Exam", "Health Insurance", 78, 78,
     "2023-12-20", "2024-12-20", "CERT-2023-156", "EXPIRED", 2, "2024-01-05"),
    ("AG004", "Emily Davis", "PoSP – Health", "Health Insurance Basics Exam", "Health Insurance", 88, 88,
     "2024-01-05", "2025-01-05", "CERT-2024-003", "ACTIVE", 0, None),
]
