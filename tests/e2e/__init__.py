"""
End-to-end test package for the Automation Exercise demo shop.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Browser automation against a live third-party site
- Role, label and placeholder based locators
- User flow testing with guaranteed account cleanup
"""
