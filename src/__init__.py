"""
Source Code Root Module

Layer Structure:
- Domain: Sales entities and the forecasting pipeline
- Application: Use cases and DTOs
- Infrastructure: MongoDB order store and health checks
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
