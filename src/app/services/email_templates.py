"""HTML bodies for outbound collaboration emails"""

from html import escape


def project_invite_template(inviter_name: str, project_name: str, role_name: str, link: str) -> str:
    return f"""
    <div style="font-family: Arial, sans-serif; padding: 20px;">
        <h2>You've been invited!</h2>
        <p><strong>{escape(inviter_name)}</strong> has invited you to join the project
        <strong>{escape(project_name)}</strong> as <strong>{escape(role_name)}</strong>.</p>
        <p>Click the link below to accept the invitation:</p>
        <a href="{escape(link, quote=True)}" style="display: inline-block; padding: 10px 20px; background-color: #007bff; color: white; text-decoration: none; border-radius: 5px;">Join Project</a>
    </div>
    """
