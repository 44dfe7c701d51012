"""
Signup Service

Campaign signup funnel microservice providing:
- Page resolution (campaign-scoped page code -> renderable page data)
- Multi-step signup form definitions and controller
- Signup step recording

Port: 8250
"""

__version__ = "1.0.0"
__service__ = "signup_service"
