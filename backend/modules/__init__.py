"""
Feature modules for the Storefront backend.

- auth: login by email, single-use authorization codes, access tokens
- catalog: active product listing and availability checks
- checkout: order validation, pricing and inventory debit

Each module keeps its Protocol interfaces, models, service, routes and
exceptions together. Modules depend on each other only through interfaces
and the shared product repository.
"""
