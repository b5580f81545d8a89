"""
Orders API v1 views.
"""
import logging
from uuid import UUID

from django.db import transaction
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import StandardPagination
from ....application.dtos import (
    AddOrderEventDTO,
    ListOrdersDTO,
    OrderLookupDTO,
    PlaceOrderDTO,
    QuotePriceDTO,
    UpdateOrderStatusDTO,
    UpdatePaymentStatusDTO,
)
from ....application.use_cases import (
    AddOrderEventUseCase,
    ConfirmPaymentUseCase,
    GetOrderProgressUseCase,
    GetOrderUseCase,
    GetTrackingStatsUseCase,
    ListOrderEventsUseCase,
    ListOrdersUseCase,
    PlaceOrderUseCase,
    QuotePriceUseCase,
    UpdateOrderStatusUseCase,
    UpdatePaymentStatusUseCase,
)
from ....infrastructure.repositories import DjangoOrderEventRepository, DjangoOrderRepository
from ...serializers.order_serializer import (
    OrderCreateSerializer,
    OrderEventCreateSerializer,
    OrderEventSerializer,
    OrderListQuerySerializer,
    OrderSerializer,
    OrderUpdateSerializer,
    PlacedOrderSerializer,
    PriceQuoteRequestSerializer,
    PriceQuoteSerializer,
    ProgressSerializer,
    TrackingStatsSerializer,
)

logger = logging.getLogger(__name__)

STATUS_FILTER = OpenApiParameter('status', str, description='Only orders in this status')


def _actor_id(request) -> str:
    return str(request.user.pk)


def _list_orders(request, customer_id=None) -> Response:
    query = OrderListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    paginator = StandardPagination().bind(request)

    use_case = ListOrdersUseCase(order_repository=DjangoOrderRepository())
    result = use_case.execute(
        ListOrdersDTO(
            customer_id=customer_id,
            status=query.validated_data.get('status'),
            offset=paginator.offset,
            limit=paginator.limit + 1,
        )
    )
    orders = result.data
    has_next = len(orders) > paginator.limit
    data = OrderSerializer(orders[:paginator.limit], many=True).data
    return paginator.get_window_response(data, has_next=has_next)


@extend_schema(tags=['Orders'])
class PriceQuoteView(APIView):
    """Price quote endpoint for the cake designer."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=PriceQuoteRequestSerializer,
        responses={200: PriceQuoteSerializer},
        summary="Price a cake configuration",
    )
    def post(self, request):
        serializer = PriceQuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = QuotePriceUseCase().execute(QuotePriceDTO(**serializer.validated_data))
        return Response(PriceQuoteSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint for customers."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[STATUS_FILTER],
        responses={200: OrderSerializer(many=True)},
        summary="List the current customer's orders",
    )
    def get(self, request):
        return _list_orders(request, customer_id=_actor_id(request))

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: PlacedOrderSerializer},
        summary="Place a cake order",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        # Create use case
        use_case = PlaceOrderUseCase(order_repository=DjangoOrderRepository())

        # Execute
        input_dto = PlaceOrderDTO(customer_id=_actor_id(request), **serializer.validated_data)
        result = use_case.execute(input_dto)

        # Return response
        return Response(PlacedOrderSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint for customers."""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OrderSerializer}, summary="Get order detail")
    def get(self, request, order_id: UUID):
        use_case = GetOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(OrderLookupDTO(order_id=order_id, customer_id=_actor_id(request)))
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderEventListView(APIView):
    """Order event timeline for customers."""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OrderEventSerializer(many=True)}, summary="List order events")
    def get(self, request, order_id: UUID):
        use_case = ListOrderEventsUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        result = use_case.execute(OrderLookupDTO(order_id=order_id, customer_id=_actor_id(request)))
        return Response(OrderEventSerializer(result.data, many=True).data)


@extend_schema(tags=['Orders'])
class OrderProgressView(APIView):
    """Order progress and delivery countdown."""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: ProgressSerializer}, summary="Get order progress")
    def get(self, request, order_id: UUID):
        use_case = GetOrderProgressUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(OrderLookupDTO(order_id=order_id, customer_id=_actor_id(request)))
        return Response(ProgressSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class ConfirmPaymentView(APIView):
    """Customer payment confirmation endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={200: OrderSerializer}, summary="Confirm payment")
    def post(self, request, order_id: UUID):
        use_case = ConfirmPaymentUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        result = use_case.execute(OrderLookupDTO(order_id=order_id, customer_id=_actor_id(request)))
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Admin Orders'])
class AdminOrderListView(APIView):
    """Order list for staff."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        parameters=[STATUS_FILTER],
        responses={200: OrderSerializer(many=True)},
        summary="List all orders",
    )
    def get(self, request):
        return _list_orders(request)


@extend_schema(tags=['Admin Orders'])
class AdminTrackingStatsView(APIView):
    """Kitchen tracking dashboard counters."""
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: TrackingStatsSerializer}, summary="Get tracking stats")
    def get(self, request):
        result = GetTrackingStatsUseCase(order_repository=DjangoOrderRepository()).execute()
        return Response(TrackingStatsSerializer(result.data).data)


@extend_schema(tags=['Admin Orders'])
class AdminOrderDetailView(APIView):
    """Order detail and status updates for staff."""
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: OrderSerializer}, summary="Get any order")
    def get(self, request, order_id: UUID):
        use_case = GetOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(OrderLookupDTO(order_id=order_id))
        return Response(OrderSerializer(result.data).data)

    @extend_schema(
        request=OrderUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Update order status and/or payment status",
    )
    def patch(self, request, order_id: UUID):
        serializer = OrderUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        staff_id = _actor_id(request)

        # Both fields are applied together or not at all
        result = None
        with transaction.atomic():
            if data.get('status'):
                use_case = UpdateOrderStatusUseCase(
                    order_repository=DjangoOrderRepository(),
                    event_repository=DjangoOrderEventRepository(),
                )
                result = use_case.execute(
                    UpdateOrderStatusDTO(
                        order_id=order_id,
                        status=data['status'],
                        staff_id=staff_id,
                        notes=data.get('notes') or None,
                        estimated_completion=data.get('estimated_completion'),
                    )
                )
            if data.get('payment_status'):
                use_case = UpdatePaymentStatusUseCase(order_repository=DjangoOrderRepository())
                result = use_case.execute(
                    UpdatePaymentStatusDTO(order_id=order_id, payment_status=data['payment_status'])
                )

        logger.info(
            f"Staff {staff_id} updated order {order_id}: "
            f"status={data.get('status')} payment_status={data.get('payment_status')}"
        )
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Admin Orders'])
class AdminOrderEventListCreateView(APIView):
    """Order events for staff, including manual tracking notes."""
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: OrderEventSerializer(many=True)}, summary="List order events")
    def get(self, request, order_id: UUID):
        use_case = ListOrderEventsUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        result = use_case.execute(OrderLookupDTO(order_id=order_id))
        return Response(OrderEventSerializer(result.data, many=True).data)

    @extend_schema(
        request=OrderEventCreateSerializer,
        responses={201: OrderEventSerializer},
        summary="Add a tracking event",
    )
    def post(self, request, order_id: UUID):
        serializer = OrderEventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = AddOrderEventUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        result = use_case.execute(
            AddOrderEventDTO(order_id=order_id, created_by=_actor_id(request), **serializer.validated_data)
        )
        return Response(OrderEventSerializer(result.data).data, status=status.HTTP_201_CREATED)
