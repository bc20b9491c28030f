# backend/app/notifications/__init__.py

"""
Email layer.

- schemas: MailMessage and DeliveryReceipt
- render: HTML report bodies
- service: SMTP and logging transports
- factory: transport selection from MAIL_BACKEND
"""
