"""
Opt-in pagination for function-based list views.

Lists are returned whole by default. When the client sends `page` or
`page_size`, the list inside the envelope is replaced by:

    {"count": 150, "next": "...?page=4", "previous": "...?page=2", "results": [...]}
"""
from functools import wraps

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data, message=''):
        return Response({
            'status': 'success',
            'message': message,
            'data': {
                'count': self.page.paginator.count,
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
                'results': data
            }
        })


def auto_paginate(view_func):
    """
    Paginate the list a GET view returns, if the client asked for a page.

        @api_view(['GET'])
        @auto_paginate
        def company_list(request):
            ...
            return success_response(serializer.data)
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        response = view_func(request, *args, **kwargs)

        wants_page = 'page' in request.query_params or 'page_size' in request.query_params
        if request.method != 'GET' or not wants_page or not isinstance(response, Response):
            return response

        payload = response.data
        if isinstance(payload, dict) and isinstance(payload.get('data'), list):
            items, message = payload['data'], payload.get('message', '')
        elif isinstance(payload, list):
            items, message = payload, ''
        else:
            return response

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(items, request)
        if page is None:
            return response
        return paginator.get_paginated_response(page, message)

    return wrapper
