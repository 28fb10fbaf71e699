"""Email subject and body templates."""

BRAND = "SoteROS Emergency Management"

# Badge colours keyed by incident priority as shown to staff.
PRIORITY_COLORS: dict[str, str] = {
    "Critical": "#dc2626",
    "High": "#ea580c",
    "Medium": "#f59e0b",
    "Low": "#3b82f6",
}
DEFAULT_PRIORITY_COLOR = PRIORITY_COLORS["Medium"]

_LAYOUT_HEAD = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{{ heading }}</title></head>
<body style="margin:0;padding:24px;background:#f4f7fa;font-family:Arial,sans-serif;">
<div style="max-width:600px;margin:0 auto;background:#ffffff;border-radius:16px;padding:32px;">
<h1 style="margin:0 0 24px;color:#1f2937;">{{ heading }}</h1>
"""

_LAYOUT_FOOT = """
<p style="margin:32px 0 0;color:#6b7280;font-size:13px;">Best regards,<br>
<strong>{{ brand }} Team</strong></p>
<p style="color:#9ca3af;font-size:12px;">This is an automated message, please do not reply to this email.</p>
</div>
</body>
</html>
"""

PASSWORD_RESET_SUBJECT = "Password Reset Request - SoteROS"
PASSWORD_RESET_BODY = _LAYOUT_HEAD + """
<p>Hello,</p>
<p>We received a request to reset the password for your SoteROS account.
Use the verification code below to complete the process:</p>
<div style="font-size:42px;font-weight:700;letter-spacing:8px;text-align:center;color:#667eea;">{{ otp }}</div>
<p><strong>Time sensitive:</strong> this code expires in <strong>{{ expires_minutes }} minutes</strong>.</p>
<p>If you didn't request this password reset, you can safely ignore this email.</p>
""" + _LAYOUT_FOOT

ACCOUNT_CREATED_SUBJECT = "Welcome to SoteROS - Your Account is Ready"
ACCOUNT_CREATED_BODY = _LAYOUT_HEAD + """
<p>Hello <strong>{{ name }}</strong>,</p>
<p>Your staff account has been created.</p>
<table>
<tr><td>Email</td><td>{{ email }}</td></tr>
<tr><td>Temporary password</td><td><code>{{ password }}</code></td></tr>
<tr><td>Position</td><td>{{ position }}</td></tr>
<tr><td>Department</td><td>{{ department }}</td></tr>
</table>
<p><strong>Important security notice:</strong> change your password immediately
after your first login. Never share your credentials with anyone.</p>
<p><a href="{{ login_url }}">Login to your account</a></p>
""" + _LAYOUT_FOOT

TEAM_ASSIGNMENT_SUBJECT = "\U0001f6a8 Incident Assignment - {incident_type}"
STAFF_ASSIGNMENT_SUBJECT = "\U0001f6a8 Personal Incident Assignment - {incident_type}"
ASSIGNMENT_BODY = _LAYOUT_HEAD + """
<p>Hello <strong>{{ name }}</strong>,</p>
<p>{{ intro }} Please review the details below and take appropriate action.</p>
<p style="text-align:center;"><span style="background:{{ priority_color }};color:#ffffff;padding:8px 20px;border-radius:20px;font-weight:700;text-transform:uppercase;">{{ priority }} Priority</span></p>
<table>
<tr><td>Type</td><td>{{ incident_type }}</td></tr>
<tr><td>Location</td><td>{{ location }}</td></tr>
<tr><td>Description</td><td>{{ description }}</td></tr>
<tr><td>Reported</td><td>{{ reported }}</td></tr>
</table>
<p><a href="{{ incident_url }}">View full incident details</a></p>
""" + _LAYOUT_FOOT
