"""Kubernetes API types for the samples.knative.dev group."""
