"""HTML bodies for transactional email."""

from html import escape

BRAND_NAME = "UrbanSquare"

WELCOME_SUBJECT = f"Welcome to {BRAND_NAME} - Your Account Has Been Created"
PASSWORD_RESET_SUBJECT = f"Password Reset - {BRAND_NAME} Security"

_LAYOUT = """
<html>
    <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="background-color: #1e3a8a; padding: 30px; border-radius: 10px; text-align: center;">
            <h1 style="color: #ffffff; margin: 0;">{brand}</h1>
        </div>
        <div style="padding: 30px 0;">
            {content}
        </div>
        <div style="border-top: 1px solid #e2e8f0; padding-top: 20px; text-align: center;">
            <p style="color: #94a3b8; font-size: 12px;">
                This is an automated message from {brand}. Please do not reply.
            </p>
        </div>
    </body>
</html>
"""


def _render(content: str) -> str:
    return _LAYOUT.format(brand=BRAND_NAME, content=content)


def welcome_template(name: str) -> str:
    return _render(f"""
            <h2 style="color: #1e293b;">Welcome, {escape(name)}!</h2>
            <p style="color: #475569; line-height: 1.6;">
                Your {BRAND_NAME} account has been created. You can now browse
                listings, compare locations and get AI-powered property insights.
            </p>
    """)


def password_reset_template(reset_url: str) -> str:
    # reset_url is inserted as-is; the token is already URL-safe hex
    return _render(f"""
            <h2 style="color: #1e293b;">Reset your password</h2>
            <p style="color: #475569; line-height: 1.6;">
                We received a request to reset your password. Click the button below
                to choose a new one. This link expires in 10 minutes.
            </p>
            <div style="text-align: center; margin: 30px 0;">
                <a href="{reset_url}"
                   style="background-color: #3b82f6; color: white; padding: 15px 30px;
                          text-decoration: none; border-radius: 5px; display: inline-block;
                          font-weight: bold;">
                    Reset Password
                </a>
            </div>
            <p style="color: #64748b; font-size: 14px;">
                If you did not request a password reset, you can ignore this email.
            </p>
    """)
