"""Generate TypeScript collection types from a Directus OpenAPI spec."""
