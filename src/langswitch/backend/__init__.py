"""HTTP service exposing locale bundles and the localised demo APIs."""
