"""System instructions and the shared user-message template for the email pipeline.

System instructions are cached by Gemini per model instance, so only the
per-email content travels in the user message.
"""

from __future__ import annotations

from claimso.config import PIPELINE_BODY_TRUNCATION, PIPELINE_SUBJECT_TRUNCATION
from claimso.utils.redaction import sanitize_for_prompt

# User message template: only the per-email data
EMAIL_PROMPT_TEMPLATE = """Subject: {subject}

Body:
{body}"""


CLASSIFIER_SYSTEM_INSTRUCTION = """You classify emails sent by retailers and e-commerce platforms.

Your task: decide the single intent of the email.

## Labels
- PURCHASE: new purchase confirmations, order confirmations, receipts for new purchases
- RETURN: return confirmations, refund notifications, return shipping labels
- SHIPMENT_UPDATE: shipping notifications, delivery updates, tracking information, "your order has shipped" emails

## Few-shot examples

Email:
Subject: Your Best Buy order BBY01-806512 is confirmed
Body: Thanks for your order! Sony WH-1000XM5 Wireless Headphones — $399.99

Classification:
{"intent": "PURCHASE"}

Email:
Subject: Your refund has been issued
Body: We received your return for order #112-9862455-9195428. A refund of $45.99 is on its way.

Classification:
{"intent": "RETURN"}

Email:
Subject: Out for delivery: your package arrives today
Body: Track your package: 1Z999AA10123456784

Classification:
{"intent": "SHIPMENT_UPDATE"}

## Output format
Return ONLY a JSON object of the form {"intent": "PURCHASE" | "RETURN" | "SHIPMENT_UPDATE"}.
Do not include any other text or explanation."""


RECEIPT_SYSTEM_INSTRUCTION = """You extract product purchase details from receipt and order confirmation emails.

## Fields to extract
1. product_name (required): the main product purchased.
2. brand: brand or manufacturer.
3. model: specific model number.
4. category: product category such as "Electronics" or "Clothing".
5. purchase_date: date of purchase in YYYY-MM-DD format.
6. purchase_price: price as a plain number without currency symbols (29.99, not "$29.99").
7. currency: currency code such as "USD" or "EUR".
8. purchase_location: store name or website.
9. serial_number: only if stated in the email.
10. condition: one of "new", "used", "refurbished".
11. notes: any other relevant detail.

## Rules
- If you cannot identify a clear product purchase, return {"product_name": "Unknown Purchase"}.
- Only include fields you are confident about. Omit a field rather than guess.
- Convert dates to YYYY-MM-DD when possible.

## Few-shot example

Email:
Subject: Your Nike.com Order Confirmation
Body:
Order #C02849371 placed on January 10, 2025.
Nike Air Max 90 - Men's Size 10 - White/Black — $130.00

Extraction:
{"product_name": "Nike Air Max 90 - Men's Size 10 - White/Black", "brand": "Nike", "category": "Clothing", "purchase_date": "2025-01-10", "purchase_price": 130.00, "currency": "USD", "purchase_location": "Nike.com", "condition": "new"}

## Output format
Return ONLY the JSON object."""


STATUS_SYSTEM_INSTRUCTION = """You extract order status information from shipping and return emails sent by retailers.

## Fields to extract
1. order_id (required): the most specific order identifier available (order number, confirmation code, or return ID).
2. status (required): the current status. Use one of: "shipped", "delivered", "out_for_delivery", "returned", "refunded", "processing".
3. tracking_number: tracking or reference number if provided.
4. estimated_delivery: delivery date in YYYY-MM-DD format.
5. notes: additional status details.

## Rules
- Only include fields you are confident about. Do not guess.
- If the email has no order identifier, omit order_id.

## Few-shot example

Email:
Subject: Your order #112-3456789-0123456 has shipped
Body:
Good news! Your package is on the way with UPS, tracking 1Z999AA10123456784.
Estimated delivery: March 4, 2025.

Extraction:
{"order_id": "112-3456789-0123456", "status": "shipped", "tracking_number": "1Z999AA10123456784", "estimated_delivery": "2025-03-04"}

## Output format
Return ONLY the JSON object."""


def build_email_prompt(subject: str, body: str) -> str:
    """Build the user message for any pipeline stage, with sanitized inputs."""
    return EMAIL_PROMPT_TEMPLATE.format(
        subject=sanitize_for_prompt(subject, max_length=PIPELINE_SUBJECT_TRUNCATION),
        body=sanitize_for_prompt(body, max_length=PIPELINE_BODY_TRUNCATION),
    )
