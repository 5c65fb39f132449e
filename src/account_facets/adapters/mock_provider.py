"""
Mock Dataset Provider.

A fake data provider for development and testing. Generates a
deterministic dataset shaped like the dashboard export: every account
owns at least one center, revenues arrive as formatted strings
("$1.2B", "850 million"), and some numeric columns are missing.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from account_facets.domain.entities import (
    Account,
    Center,
    Dataset,
    Function,
    Prospect,
    Service,
    Tech,
)


class MockDatasetProvider:
    """Fake dataset provider for development and testing."""

    # (name, region, country, industry)
    MOCK_ACCOUNTS = [
        ("Acme Analytics Inc", "Americas", "United States", "Technology"),
        ("Borealis Bank plc", "EMEA", "United Kingdom", "Financial Services"),
        ("Cobalt Motors AG", "EMEA", "Germany", "Automotive"),
        ("Delta Health Corp", "Americas", "United States", "Healthcare"),
        ("Everest Retail Ltd", "APAC", "Australia", "Retail"),
        ("Fjord Energy ASA", "EMEA", "Norway", "Energy"),
        ("Granite Insurance Co", "Americas", "Canada", "Insurance"),
        ("Helix Pharma SA", "EMEA", "Switzerland", "Healthcare"),
        ("Ion Semiconductors KK", "APAC", "Japan", "Technology"),
        ("Juniper Logistics LLC", "Americas", "United States", "Logistics"),
        ("Kestrel Media Group", "EMEA", "France", "Media"),
        ("Lumen Telecom Pte", "APAC", "Singapore", "Telecom"),
    ]

    REVENUES = ["$1.2B", "850 million", "USD 3.4 bn", "12000000", "$450M", None, "", "0"]
    ACCOUNT_TYPES = ["Enterprise", "Mid-Market", "Startup"]
    SOURCES = ["Research", "Partner", "Inbound"]
    COVERAGE = ["Full", "Partial"]
    NASSCOM = ["Member", "Non-Member"]
    EMPLOYEE_RANGES = ["1-500", "501-5000", "5001-50000", "50000+"]

    CENTER_TYPES = ["GCC", "Captive", "Shared Services"]
    CENTER_FOCUS = ["Engineering", "Operations", "Analytics", "Support"]
    CITIES = [
        ("Bengaluru", "Karnataka"),
        ("Hyderabad", "Telangana"),
        ("Pune", "Maharashtra"),
        ("Chennai", "Tamil Nadu"),
        ("Gurugram", "Haryana"),
    ]
    CENTER_STATUS = ["Active", "Planned", "Closed"]

    FUNCTIONS = ["Engineering", "Finance", "HR", "IT Support", "Procurement", "Legal"]
    SERVICES = ["Application Development", "Data Engineering", "Finance Ops", "Cloud"]
    SOFTWARE = [
        ("Salesforce", "Salesforce", "CRM"),
        ("SAP S/4HANA", "SAP", "ERP"),
        ("Workday", "Workday", "HCM"),
        ("Snowflake", "Snowflake", "Data"),
        ("ServiceNow", "ServiceNow", "ITSM"),
        ("Tableau", "Salesforce", "Analytics"),
    ]

    DEPARTMENTS = ["Engineering", "Finance", "Operations", "Human Resources"]
    LEVELS = ["C-Level", "VP", "Director", "Manager"]
    TITLES = [
        "Head of Engineering",
        "Chief Financial Officer",
        "VP Operations",
        "Director of Talent",
        "Site Leader",
        "Engineering Manager",
    ]
    FIRST_NAMES = ["Asha", "Rahul", "Meera", "Vikram", "Priya", "Arjun", "Kavya", "Rohan"]
    LAST_NAMES = ["Iyer", "Sharma", "Reddy", "Nair", "Gupta", "Menon"]

    def __init__(self, seed: int = 42, max_centers_per_account: int = 3) -> None:
        """
        Initialize mock provider with random seed.

        Args:
            seed: Random seed for reproducibility
            max_centers_per_account: Upper bound of centers per account
        """
        if max_centers_per_account < 1:
            raise ValueError("max_centers_per_account must be at least 1")
        self._seed = seed
        self._max_centers = max_centers_per_account
        self._dataset: Optional[Dataset] = None

    def get_dataset(self) -> Dataset:
        """Return the generated dataset (built once, then reused)."""
        if self._dataset is None:
            self._dataset = self._generate()
        return self._dataset

    def _generate(self) -> Dataset:
        rng = random.Random(self._seed)
        accounts: List[Account] = []
        centers: List[Center] = []
        functions: List[Function] = []
        services: List[Service] = []
        prospects: List[Prospect] = []
        tech: List[Tech] = []

        for index, (name, region, country, industry) in enumerate(self.MOCK_ACCOUNTS):
            accounts.append(self._account(rng, index, name, region, country, industry))

            for center_index in range(rng.randint(1, self._max_centers)):
                key = f"CN-{index + 1:03d}-{center_index + 1}"
                centers.append(self._center(rng, key, name))

                for function_name in rng.sample(self.FUNCTIONS, rng.randint(1, 3)):
                    functions.append(
                        Function(cn_unique_key=key, function_name=function_name)
                    )
                services.append(
                    Service(
                        cn_unique_key=key,
                        primary_service=rng.choice(self.SERVICES),
                        focus_region=region,
                    )
                )
                for software, vendor, category in rng.sample(
                    self.SOFTWARE, rng.randint(0, 3)
                ):
                    tech.append(
                        Tech(
                            cn_unique_key=key,
                            account_global_legal_name=name,
                            software_in_use=software,
                            software_vendor=vendor,
                            software_category=category,
                        )
                    )

            for _ in range(rng.randint(0, 3)):
                prospects.append(self._prospect(rng, name))

        return Dataset(
            accounts=accounts,
            centers=centers,
            functions=functions,
            services=services,
            prospects=prospects,
            tech=tech,
        )

    def _account(
        self,
        rng: random.Random,
        index: int,
        name: str,
        region: str,
        country: str,
        industry: str,
    ) -> Account:
        years: Optional[str] = None if index % 5 == 4 else str(rng.randint(1, 30))
        return Account(
            account_global_legal_name=name,
            account_hq_region=region,
            account_hq_country=country,
            account_hq_industry=industry,
            account_data_coverage=rng.choice(self.COVERAGE),
            account_source=rng.choice(self.SOURCES),
            account_type=rng.choice(self.ACCOUNT_TYPES),
            account_primary_category=industry,
            account_primary_nature="Public" if index % 3 else "Private",
            account_nasscom_status=rng.choice(self.NASSCOM),
            account_hq_employee_range=rng.choice(self.EMPLOYEE_RANGES),
            account_center_employees_range=rng.choice(self.EMPLOYEE_RANGES[:3]),
            account_hq_revenue=self.REVENUES[index % len(self.REVENUES)],
            years_in_india=years,
        )

    def _center(self, rng: random.Random, key: str, account_name: str) -> Center:
        city, state = rng.choice(self.CITIES)
        inc_year: Optional[float] = (
            None if rng.random() < 0.15 else float(rng.randint(1995, 2024))
        )
        return Center(
            cn_unique_key=key,
            account_global_legal_name=account_name,
            center_name=f"{account_name.split()[0]} {city}",
            center_type=rng.choice(self.CENTER_TYPES),
            center_focus=rng.choice(self.CENTER_FOCUS),
            center_city=city,
            center_state=state,
            center_country="India",
            center_employees_range=rng.choice(self.EMPLOYEE_RANGES[:3]),
            center_status=rng.choice(self.CENTER_STATUS),
            center_inc_year=inc_year,
        )

    def _prospect(self, rng: random.Random, account_name: str) -> Prospect:
        full_name: Tuple[str, str] = (
            rng.choice(self.FIRST_NAMES),
            rng.choice(self.LAST_NAMES),
        )
        return Prospect(
            account_global_legal_name=account_name,
            prospect_full_name=" ".join(full_name),
            prospect_title=rng.choice(self.TITLES),
            prospect_department=rng.choice(self.DEPARTMENTS),
            prospect_level=rng.choice(self.LEVELS),
            prospect_city=rng.choice(self.CITIES)[0],
        )
