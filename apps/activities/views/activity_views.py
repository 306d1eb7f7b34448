"""
Activity catalog views.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers import ActivitySerializer
from ..services import CatalogService


class ActivityListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        activities = CatalogService.list_activities(request.user)
        return Response(ActivitySerializer(activities, many=True).data)

    def post(self, request):
        serializer = ActivitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        activity = CatalogService.create_activity(
            request.user,
            name=serializer.validated_data['name'],
            point_value=serializer.validated_data['point_value'],
            icon=serializer.validated_data.get('icon'),
        )
        return Response(ActivitySerializer(activity).data, status=status.HTTP_201_CREATED)


class ActivityDetailView(APIView):
    """Update or delete one of the caller's activities"""
    permission_classes = [IsAuthenticated]

    def put(self, request, pk):
        # Fields left out of the body keep their current values
        serializer = ActivitySerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        activity = CatalogService.update_activity(request.user, pk, serializer.validated_data)
        return Response(ActivitySerializer(activity).data)

    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        CatalogService.delete_activity(request.user, pk)
        return Response({'message': 'Deleted'})
