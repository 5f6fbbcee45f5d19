"""
Subject and body rendering for notification emails.

All functions here are pure: unknown actions and entity types fall back to
the raw value instead of failing.
"""

import os
from html import escape
from typing import Tuple

from html2text import html2text

from models.notification import NotificationEvent
from shared.utils import format_timestamp_ar

APP_NAME = "بلاغ"
DEFAULT_ADMIN_PANEL_URL = "https://balagh-admin.vercel.app"
UNKNOWN_PERFORMER = "غير محدد"
GENERIC_ACTION_LABEL = "انتقل إلى لوحة التحكم"

SUBJECT_ACTION_LABELS = {
    "created": "إنشاء",
    "updated": "تعديل",
    "deleted": "حذف",
    "approved": "موافقة",
    "rejected": "رفض",
}

SUBJECT_ENTITY_LABELS = {
    "martyrs": "شهيد",
    "locations": "موقع",
    "legends": "أسطورة",
    "activities": "نشاط",
    "activityTypes": "نوع نشاط",
    "news": "خبر",
    "liveNews": "خبر مباشر",
    "admins": "مدير",
    "sectors": "قطاع",
}

BODY_ACTION_LABELS = {
    "created": "تم إنشاء",
    "updated": "تم تعديل",
    "deleted": "تم حذف",
    "approved": "تم الموافقة على",
    "rejected": "تم رفض",
}

BODY_ENTITY_LABELS = {
    "martyrs": "الشهيد",
    "locations": "الموقع",
    "legends": "الأسطورة",
    "activities": "النشاط",
    "activityTypes": "نوع النشاط",
    "news": "الخبر",
    "liveNews": "الخبر المباشر",
    "admins": "المدير",
    "sectors": "القطاع",
}

# entityType -> (admin panel sub-path, button label)
ACTION_PAGES = {
    "activities": ("/activities", "إدارة الأنشطة"),
    "martyrs": ("/martyrs", "إدارة الشهداء"),
    "locations": ("/locations", "إدارة المواقع"),
    "news": ("/news", "إدارة الأخبار"),
}


def get_admin_panel_url() -> str:
    return os.getenv("ADMIN_PANEL_URL", DEFAULT_ADMIN_PANEL_URL).rstrip("/")


def subject_action_label(action: str) -> str:
    return SUBJECT_ACTION_LABELS.get(action, action)


def subject_entity_label(entity_type: str) -> str:
    return SUBJECT_ENTITY_LABELS.get(entity_type, entity_type)


def body_action_label(action: str) -> str:
    return BODY_ACTION_LABELS.get(action, f"تم {action}")


def body_entity_label(entity_type: str) -> str:
    return BODY_ENTITY_LABELS.get(entity_type, entity_type)


def get_action_link(entity_type: str, base_url: str | None = None) -> Tuple[str, str]:
    """
    Call-to-action target for an entity type.

    Returns:
        (url, button label); unmapped types get the bare panel URL
    """
    base_url = (base_url or get_admin_panel_url()).rstrip("/")
    page = ACTION_PAGES.get(entity_type)
    if page is None:
        return base_url, GENERIC_ACTION_LABEL
    path, label = page
    return f"{base_url}{path}", label


def build_subject(notification: NotificationEvent) -> str:
    """e.g. "بلاغ - إنشاء نشاط: Summer camp"."""
    action_text = subject_action_label(notification.action)
    entity_text = subject_entity_label(notification.entity_type)
    return f"{APP_NAME} - {action_text} {entity_text}: {notification.entity_name}"


def build_html(notification: NotificationEvent, base_url: str | None = None) -> str:
    """
    Build the RTL HTML body for a notification email.

    Args:
        notification: The event being reported
        base_url: Admin panel URL override (defaults to ADMIN_PANEL_URL)

    Returns:
        HTML string
    """
    action_text = escape(body_action_label(notification.action))
    entity_text = escape(body_entity_label(notification.entity_type))
    entity_name = escape(notification.entity_name)
    performer_name = escape(notification.performed_by_name or UNKNOWN_PERFORMER)
    performer_email = escape(notification.performed_by)
    timestamp = format_timestamp_ar(notification.timestamp)
    button_url, button_text = get_action_link(notification.entity_type, base_url)

    details_row = ""
    if notification.details:
        details_row = f"""
                <tr>
                  <td style="padding: 8px 0; color: #6b7280; font-weight: bold; vertical-align: top;">تفاصيل إضافية:</td>
                  <td style="padding: 8px 0; color: #374151;">{escape(notification.details)}</td>
                </tr>"""

    return f"""
<!DOCTYPE html>
<html dir="rtl" lang="ar">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>إشعار من {APP_NAME}</title>
</head>
<body style="font-family: Arial, sans-serif; background-color: #f5f5f5; margin: 0; padding: 20px; direction: rtl;">
    <div style="max-width: 600px; margin: 0 auto; background-color: white; border-radius: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.1);">
        <div style="background: linear-gradient(135deg, #1e3a8a 0%, #3b82f6 100%); color: white; padding: 30px; text-align: center; border-radius: 10px 10px 0 0;">
            <h1 style="margin: 0; font-size: 24px; font-weight: bold;">🔔 إشعار من {APP_NAME}</h1>
            <p style="margin: 10px 0 0 0; opacity: 0.9; font-size: 16px;">نظام إدارة المحتوى</p>
        </div>
        <div style="padding: 30px;">
            <div style="background-color: #f8fafc; border-right: 4px solid #3b82f6; padding: 20px; margin-bottom: 25px; border-radius: 0 8px 8px 0;">
                <h2 style="margin: 0 0 15px 0; color: #1e40af; font-size: 20px;">{action_text} {entity_text}</h2>
                <p style="margin: 0; font-size: 18px; font-weight: bold; color: #374151;">{entity_name}</p>
            </div>
            <div style="margin-bottom: 25px;">
                <h3 style="color: #374151; margin: 0 0 15px 0; font-size: 16px; border-bottom: 2px solid #e5e7eb; padding-bottom: 10px;">📋 تفاصيل العملية</h3>
                <table style="width: 100%; border-collapse: collapse;">
                <tr>
                  <td style="padding: 8px 0; color: #6b7280; font-weight: bold; width: 30%;">المُنفِذ:</td>
                  <td style="padding: 8px 0; color: #374151;">{performer_name}</td>
                </tr>
                <tr>
                  <td style="padding: 8px 0; color: #6b7280; font-weight: bold;">البريد الإلكتروني:</td>
                  <td style="padding: 8px 0; color: #374151;">{performer_email}</td>
                </tr>
                <tr>
                  <td style="padding: 8px 0; color: #6b7280; font-weight: bold;">التاريخ والوقت:</td>
                  <td style="padding: 8px 0; color: #374151;">{timestamp}</td>
                </tr>{details_row}
                </table>
            </div>
            <div style="text-align: center; margin: 30px 0;">
                <a href="{escape(button_url, quote=True)}" style="display: inline-block; background: linear-gradient(135deg, #10b981 0%, #059669 100%); color: white; padding: 15px 40px; text-decoration: none; border-radius: 8px; font-weight: bold; font-size: 16px;">🚀 {button_text}</a>
                <p style="margin: 10px 0 0 0; color: #6b7280; font-size: 12px;">انقر على الزر أعلاه للانتقال مباشرة إلى لوحة التحكم</p>
            </div>
            <div style="background-color: #fef3c7; border: 1px solid #f59e0b; border-radius: 8px; padding: 15px; margin-top: 25px;">
                <p style="margin: 0; color: #92400e; font-size: 14px; text-align: center;">📧 هذا إشعار تلقائي من نظام {APP_NAME} لإدارة المحتوى</p>
            </div>
        </div>
        <div style="background-color: #f8fafc; padding: 20px; text-align: center; border-radius: 0 0 10px 10px; border-top: 1px solid #e5e7eb;">
            <p style="margin: 0; color: #6b7280; font-size: 12px;">
                © {APP_NAME} - نظام إدارة المحتوى<br>
                هذا البريد الإلكتروني تم إرساله تلقائياً، يرجى عدم الرد عليه
            </p>
        </div>
    </div>
</body>
</html>
"""


def build_text(html_body: str) -> str:
    """Plain-text alternative derived from the HTML body."""
    return html2text(html_body)


def render_notification(
    notification: NotificationEvent, base_url: str | None = None
) -> Tuple[str, str, str]:
    """Render (subject, html, text) for a notification."""
    html_body = build_html(notification, base_url)
    return build_subject(notification), html_body, build_text(html_body)
