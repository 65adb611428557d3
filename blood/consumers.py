from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.contrib.auth.models import AnonymousUser

from accounts.identity import resolve_identity, ROLE_DONOR, ROLE_HOSPITAL
from .realtime import hospital_group, donor_group


class _RoleFeedConsumer(AsyncJsonWebsocketConsumer):
    """
    Server-push only. Sessions whose account does not resolve to `role`
    are closed before accept.
    """
    role = None

    def group_for(self, identity):
        raise NotImplementedError

    async def connect(self):
        user = self.scope.get("user", None)
        if not user or isinstance(user, AnonymousUser) or not user.is_authenticated:
            await self.close()
            return

        identity = await database_sync_to_async(resolve_identity)(user)
        if identity.role != self.role:
            await self.close()
            return

        self.group_name = self.group_for(identity)
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        if hasattr(self, "group_name"):
            await self.channel_layer.group_discard(self.group_name, self.channel_name)


class HospitalFeedConsumer(_RoleFeedConsumer):
    """
    All hospitals share one group and receive every new willingness request.
    """
    role = ROLE_HOSPITAL

    def group_for(self, identity):
        return hospital_group()

    async def willingness_created(self, event):
        await self.send_json(event.get("data", {}))


class DonorFeedConsumer(_RoleFeedConsumer):
    """
    Each donor joins donor_<profile_id> and hears how hospitals answered.
    """
    role = ROLE_DONOR

    def group_for(self, identity):
        return donor_group(identity.profile_id)

    async def request_responded(self, event):
        await self.send_json(event.get("data", {}))
