from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from inbox_sorter.models import EmailRecord

# Sample mailbox used in place of a real mail connection.
DEMO_TEMPLATES = (
    EmailRecord(
        id="1",
        from_email="newsletter@techcompany.com",
        subject="🎉 Exclusive 50% OFF Sale - Limited Time!",
        date="",
        body=(
            "Hi there! Don't miss our biggest sale of the year. Get 50% off all products. "
            "Shop now! Click here to unsubscribe: https://techcompany.com/unsubscribe?id=123"
        ),
    ),
    EmailRecord(
        id="2",
        from_email="billing@yourbank.com",
        subject="Your Monthly Statement is Ready",
        date="",
        body=(
            "Your bank statement for this month is now available. Please review your "
            "transactions. Contact us if you have any questions."
        ),
    ),
    EmailRecord(
        id="3",
        from_email="noreply@deals.com",
        subject="Today Only: Free Shipping on Everything!",
        date="",
        body=(
            "Amazing deal alert! Free shipping on all orders today only. Don't wait! "
            "Unsubscribe here: https://deals.com/unsubscribe"
        ),
    ),
    EmailRecord(
        id="4",
        from_email="support@company.com",
        subject="Security Alert: New Login Detected",
        date="",
        body=(
            "We detected a new login to your account from a new device. If this wasn't you, "
            "please reset your password immediately."
        ),
    ),
    EmailRecord(
        id="5",
        from_email="marketing@fashion.com",
        subject="New Arrivals You'll Love ❤️",
        date="",
        body=(
            "Check out our latest collection! Spring fashion is here. Browse now and enjoy "
            "exclusive discounts. Unsubscribe: https://fashion.com/unsub"
        ),
    ),
    EmailRecord(
        id="6",
        from_email="admin@workspace.com",
        subject="Action Required: Verify Your Account",
        date="",
        body=(
            "Your account verification is pending. Please verify your email address within "
            "24 hours to maintain access to your account."
        ),
    ),
)


def _iso_utc(ts: datetime) -> str:
    # Millisecond precision with a "Z" suffix, e.g. 2024-05-01T10:00:00.000Z
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_demo_emails(count: int, now: Optional[datetime] = None) -> List[EmailRecord]:
    """
    Build count sample emails by cycling through the templates.
    Email i gets id str(i + 1) and is dated i hours before now.
    """
    now = now or datetime.now(timezone.utc)
    emails: List[EmailRecord] = []
    for i in range(max(0, count)):
        template = DEMO_TEMPLATES[i % len(DEMO_TEMPLATES)]
        emails.append(
            EmailRecord(
                id=str(i + 1),
                from_email=template.from_email,
                subject=template.subject,
                date=_iso_utc(now - timedelta(hours=i)),
                body=template.body,
                headers={},
            )
        )
    return emails
