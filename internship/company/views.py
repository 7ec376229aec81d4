from rest_framework import status
from rest_framework.decorators import api_view

from core.permissions.decorators import require_permission
from core.permissions.matrix import Resources
from magang_project.pagination import auto_paginate
from magang_project.response_formatter import success_response

from .serializers import CompanyCreateSerializer, CompanyReadSerializer, CompanyUpdateSerializer
from .services import CompanyService


@api_view(['GET', 'POST'])
@require_permission(Resources.COMPANIES)
@auto_paginate
def company_list(request):
    """
    List all companies or create a new company.

    GET /api/companies/
    - Search: ?search=query (searches name, address, contact)

    POST /api/companies/
    - Request body: { "nama_perusahaan", "alamat"?, "kontak"? }
    """
    service = CompanyService()

    if request.method == 'GET':
        companies = service.list_companies(request.query_params.get('search'))
        return success_response(CompanyReadSerializer(companies, many=True).data)

    serializer = CompanyCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    company = service.create(serializer.to_dto())
    return success_response(CompanyReadSerializer(company).data, 'Company created', status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Resources.COMPANIES)
def company_detail(request, pk):
    """
    Retrieve, update or delete a company.

    GET /api/companies/<pk>/
    PUT/PATCH /api/companies/<pk>/
    DELETE /api/companies/<pk>/
    """
    service = CompanyService()

    if request.method == 'GET':
        return success_response(CompanyReadSerializer(service.get(pk)).data)

    if request.method in ['PUT', 'PATCH']:
        serializer = CompanyUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        company = service.update(serializer.to_dto(pk))
        return success_response(CompanyReadSerializer(company).data, 'Company updated')

    service.delete(pk)
    return success_response(message='Company deleted')
