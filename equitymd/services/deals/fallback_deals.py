"""
Priority deals served when the marketplace database has no match.

These are the featured Back Bay, Sutera and Starboard offerings. They are
plain records consumed by ``FallbackDealProvider``; nothing else reads them.
"""

STORAGE_URL = "https://frtxsynlvwhpnzzgfgbt.supabase.co/storage/v1/object/public"

_BACK_BAY = {
    "company_name": "Back Bay Capital",
    "company_logo_url": None,
    "years_in_business": 10,
    "company_description": (
        "Back Bay Investment Group specializes in real estate development and "
        "value-add projects across Southern California."
    ),
    "website_url": None,
    "total_deal_volume": 30000000,
}

_SUTERA = {
    "company_name": "Sutera Properties",
    "company_logo_url": f"{STORAGE_URL}/syndicatorlogos/suteraproperties.png",
    "years_in_business": 8,
    "company_description": (
        "Sutera is an emerging Multifamily Investment & Property Management firm "
        "based in Nashville, Tennessee focused on Value-Add Acquisitions and "
        "Management, primarily in the Southeast."
    ),
    "website_url": None,
    "total_deal_volume": 15000000,
}

_STARBOARD = {
    "company_name": "Starboard Realty",
    "company_logo_url": f"{STORAGE_URL}/logos//Starboard_reality.jpg",
    "years_in_business": 10,
    "company_description": (
        "Starboard Realty Advisors is a privately held, fully-integrated real "
        "estate firm specializing in multifamily and commercial properties."
    ),
    "website_url": "https://starboard-realty.com/",
    "total_deal_volume": 608000000,
}

_LIVA_DESCRIPTION = """Project Overview:
Sutera Properties presents Liva, a ground-up multifamily development in Travelers Rest, South Carolina, a rapidly growing suburb of Greenville. The project spans 10.5 acres and includes 120 multifamily units and 32 individually platted townhomes, totaling 152 units. The site is 100% shovel-ready with Land Disturbance Permits secured as of March 2025.

Investment Highlights:
• Updated Business Plan: The multifamily portion will be held as a rental property with a projected un-trended Yield on Cost of 7.19% (up from 6.8%), while townhomes will be sold to individual buyers, responding to strong local demand.
• Cost Efficiency: Reduced per-unit basis for the multifamily to $205k (from $250k), compared to recent market comps like The Standard at Pinestone, which received bids at $230k/unit in 2024.
• Prime Location: Located near the Swamp Rabbit Trail and half a mile from Travelers Rest's Main Street, with planned streetscape improvements enhancing connectivity.
• Market Dynamics: Travelers Rest is experiencing 3.43% annual population growth, with zero projected multifamily deliveries in the North Greenville submarket, positioning Liva to capitalize on strong demand.

Financial Snapshot:
• Total Project Cost: $38,226,500
• Equity Raise: $12,340,000
• Construction LTV: 65%
• Estimated Hold Period: 5 years

Amenities & Design:
Liva promotes an active lifestyle with resort-style amenities including a pool, clubhouse, fitness center, fire pit, dog park, bike barn, and a multi-use path connecting to the Main Street corridor. Units feature spacious, open floor plans tailored to the unique fabric of Travelers Rest.

Why Invest?
Backed by Sutera Properties' expertise, Liva offers a flexible exit strategy, strong risk-adjusted returns, and a prime position in a high-growth market. With construction set to begin upon capitalization, this is a timely opportunity to invest in the thriving Upstate South Carolina region."""


PRIORITY_DEALS = [
    {
        "id": "backbay-1",
        "syndicator_id": "back-bay-capital",
        "title": "San Diego Multi-Family Offering",
        "slug": "san-diego-multi-family-offering",
        "location": "San Diego, CA",
        "property_type": "Multi-Family",
        "status": "active",
        "target_irr": 15,
        "minimum_investment": 500000,
        "investment_term": 5,
        "description": (
            "Back Bay Investment Group presents an opportunity to invest in a fund "
            "focused on multifamily development and value-add projects in Southern "
            "California. Leveraging the region's robust economy, diverse job market, "
            "and housing demand, the fund aims to capitalize on the region's housing "
            "shortage while delivering superior risk-adjusted returns."
        ),
        "address": {"street": "", "city": "San Diego", "state": "CA", "zip": ""},
        "investment_highlights": [
            "Access to Institutional Grade Assets",
            "Prime Residential Markets",
            "Tax Deductions & Bonus Depreciation Benefits",
            "Target 75% Cash on Cash",
            "15% Target Investor IRR",
            "1.75x Target Equity Multiple",
        ],
        "total_equity": 10000000,
        "featured": True,
        "cover_image_url": f"{STORAGE_URL}/deal-media//Backbay_SanDeigo.jpg",
        "syndicator": _BACK_BAY,
    },
    {
        "id": "backbay-2",
        "syndicator_id": "back-bay-capital",
        "title": "Newport Beach Residential Offering",
        "slug": "newport-beach-residential-offering",
        "location": "Newport Beach, CA",
        "property_type": "Residential",
        "status": "active",
        "target_irr": 20,
        "minimum_investment": 250000,
        "investment_term": 2,
        "description": (
            "Back Bay Investment Group is offering an exclusive opportunity to invest "
            "in residential real estate in Newport Beach and surrounding coastal "
            "communities, targeting high-demand neighborhoods with limited inventory "
            "and strong growth potential."
        ),
        "address": {"street": "", "city": "Newport Beach", "state": "CA", "zip": ""},
        "investment_highlights": [
            "Short Term Investment",
            "Value-Add Strategy",
            "Multiple Exit Options",
            "Target 60% Cash on Cash",
            "20% Target Investor IRR",
            "1.6x Target Equity Multiple",
        ],
        "total_equity": 10000000,
        "featured": True,
        "cover_image_url": f"{STORAGE_URL}/deal-media//Backbay_Newport.jpg",
        "syndicator": _BACK_BAY,
    },
    {
        "id": "backbay-3",
        "syndicator_id": "back-bay-capital",
        "title": "Orange County Pref Equity Offering",
        "slug": "orange-county-pref-equity-offering",
        "location": "Newport Beach, CA",
        "property_type": "Preferred Equity",
        "status": "active",
        "target_irr": 15,
        "minimum_investment": 100000,
        "investment_term": 2,
        "description": (
            "Back Bay Investment Group is offering a preferred equity investment with "
            "a fixed 15% annual return, paid quarterly, and a targeted holding period "
            "of 1–3 years. Designed for investors seeking secure, predictable income, "
            "this offering provides priority in the capital stack above common equity."
        ),
        "address": {"street": "", "city": "Newport Beach", "state": "CA", "zip": ""},
        "investment_highlights": [
            "Quarterly Payments",
            "Fixed 15% Return",
            "Priority in the Equity Stack",
            "Target 45% Cash on Cash",
            "15% Target Investor IRR",
            "1.45x Target Equity Multiple",
        ],
        "total_equity": 10000000,
        "featured": True,
        "cover_image_url": f"{STORAGE_URL}/deal-media//Backbay_OrangeCounty.jpg",
        "syndicator": _BACK_BAY,
    },
    {
        "id": "sutera-1",
        "syndicator_id": "sutera-properties",
        "title": "Greenville Apartment Complex",
        "slug": "greenville-apartment-complex",
        "location": "Travelers Rest, SC",
        "property_type": "Multi-Family",
        "status": "active",
        "target_irr": 17.19,
        "minimum_investment": 50000,
        "investment_term": 5,
        "description": _LIVA_DESCRIPTION,
        "address": {"street": "", "city": "Travelers Rest", "state": "SC", "zip": ""},
        "investment_highlights": [
            "Ground-up development",
            "152 total units (120 multifamily + 32 townhomes)",
            "Resort-style amenities",
            "Pool and clubhouse",
            "Fitness center",
            "Dog park and bike barn",
            "Prime location near Swamp Rabbit Trail",
            "Shovel-ready with permits secured",
        ],
        "total_equity": 12340000,
        "featured": True,
        "cover_image_url": f"{STORAGE_URL}/deal-media/liva_2025/IMG_0980.jpeg",
        # IMG_0980 to IMG_0986 in the liva_2025 folder
        "media_urls": [
            f"{STORAGE_URL}/deal-media/liva_2025/IMG_{n}.jpeg"
            for n in range(980, 987)
        ],
        "syndicator": _SUTERA,
    },
    {
        "id": "starboard-2",
        "syndicator_id": "starboard-realty",
        "title": "Multifamily ADU Opportunity",
        "slug": "multifamily-adu-opportunity",
        "location": "Southern California",
        "property_type": "Multi-Family",
        "status": "active",
        "target_irr": 30,
        "minimum_investment": 50000,
        "investment_term": 3,
        "description": (
            "Starboard Realty Advisors is offering investors the opportunity to invest "
            "in the high-demand multifamily markets of Southern California. With a "
            "growing pipeline of opportunities, the Fund will be opportunistically "
            "deploying capital to acquire small multifamily buildings with the intent "
            "of maximizing revenue growth through renovations and the addition of "
            "units by leveraging California's recent Accessory Dwelling Unit (ADU) "
            "legislation. The Fund intends to strategically acquire multifamily "
            "opportunities with targeted property level IRRs of 30%+ and equity "
            "multiples of 1.60X – 1.90X+ over a 2-3 year investment horizon. The Fund "
            "plans to leverage economies of scale through unique relationships with "
            "highly skilled vendors to minimize acquisition, materials, labor, and "
            "operational costs. The Fund further hopes to potentially enhance returns "
            "to investors through cost segregation and accelerated depreciation "
            "strategies."
        ),
        "address": {"street": "", "city": "Southern California", "state": "CA", "zip": ""},
        "investment_highlights": [
            "30%+ Target Property IRR",
            "1.60X - 1.90X+ Equity Multiple",
            "2-3 Year Investment Horizon",
            "ADU Legislation Leverage",
            "Economies of Scale",
            "Cost Segregation & Tax Benefits",
        ],
        "total_equity": 5000000,
        "featured": True,
        "cover_image_url": f"{STORAGE_URL}/deal-media//adu.png",
        "syndicator": _STARBOARD,
    },
]


# Documents published for fallback deals, keyed by slug
FALLBACK_DOCUMENTS = {
    "multifamily-adu-opportunity": [
        {
            "id": "adu-brochure-1",
            "file_name": (
                "Starboard Southern California Multifamily ADU Opportunity "
                "Fund I LLC - Brochure"
            ),
            "file_type": "PDF",
            "file_size": 2458000,  # ~2.5MB
            "file_url": (
                f"{STORAGE_URL}/propertydocs//Starboard%20Southern%20California"
                "%20Multifamily%20ADU%20Opportunity%20Fund%20I%20LLC%20-%20Brochure"
                "%20(Final)%20(1).pdf"
            ),
            "is_private": False,
        },
    ],
}
