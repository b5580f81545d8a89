"""
Custom pagination classes.
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """Standard pagination with configurable page size."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    @property
    def offset(self) -> int:
        """Row offset of the requested page."""
        return (self.page_number - 1) * self.limit

    @property
    def limit(self) -> int:
        return self.page_size_value

    def bind(self, request) -> 'StandardPagination':
        """Read page and page_size from the request without a queryset."""
        self.request = request
        self.page_size_value = self.get_page_size(request) or self.page_size
        try:
            self.page_number = max(int(request.query_params.get(self.page_query_param, 1)), 1)
        except (TypeError, ValueError):
            self.page_number = 1
        return self

    def get_window_response(self, data, has_next: bool):
        """Paginated envelope for a repository window."""
        return Response({
            'page': self.page_number,
            'page_size': self.limit,
            'has_next': has_next,
            'results': data,
        })
