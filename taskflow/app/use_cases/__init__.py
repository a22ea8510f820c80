"""
Use Cases

Organized into domain folders:
- access/: Bearer authentication and workspace role checks
- auth/: Registration, login, token refresh, logout
- users/: Profile and password management
- workspaces/: Workspace and membership management
"""
