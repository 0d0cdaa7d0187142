"""Schemathesis-based API schema validation tests.

This test suite uses property-based testing to generate test cases from the
OpenAPI specification and validate the running status service against it.
"""

from pathlib import Path

import schemathesis
import yaml

# Load the OpenAPI schema from the local file
schema_path = Path(__file__).parent.parent.parent / "openapi.yaml"
with open(schema_path) as f:
    schema_dict = yaml.safe_load(f)
schema = schemathesis.openapi.from_dict(schema_dict)


@schema.parametrize()
def test_api_schema_compliance(case, provider_url):
    """Test API endpoints against the OpenAPI schema.

    Both routes take no input, so this checks that every response has a
    documented status code, content type and body shape.
    """
    case.call_and_validate(base_url=provider_url)
