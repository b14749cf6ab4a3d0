# dashboard/application/users/ensure_admin.py
from dashboard.extensions import db
from dashboard.models.user import User
from dashboard.utils.transaction import transactional


def ensure_admin_user(*, username: str, password: str) -> User:
    """
    Create the operator account, or reset its password when it exists.
    """
    if not username or not password:
        raise ValueError("Username and password required")

    user = User.query.filter_by(username=username).first()

    with transactional():
        if not user:
            user = User()
            user.username = username
            user.is_active = True
            db.session.add(user)

        user.set_password(password)

    return user
