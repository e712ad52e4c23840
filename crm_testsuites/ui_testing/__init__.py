"""UI testing: Playwright framework helpers and browser-driven tests."""
