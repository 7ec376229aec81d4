from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend


class ActiveUserBackend(ModelBackend):
    """
    Username/password backend restricted to active accounts.

    The default manager already hides soft-deleted users; a deleted account
    keeps its username reserved only in the history, so another active user
    may reuse it.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        UserModel = get_user_model()
        if username is None:
            username = kwargs.get(UserModel.USERNAME_FIELD)
        if username is None or password is None:
            return None
        try:
            user = UserModel.objects.get(username=username)
        except UserModel.DoesNotExist:
            # Run the hasher once to keep timing similar for unknown usernames
            UserModel().set_password(password)
            return None
        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None

    def get_user(self, user_id):
        UserModel = get_user_model()
        try:
            return UserModel.objects.get(pk=user_id)
        except UserModel.DoesNotExist:
            return None
