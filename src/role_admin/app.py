# src/role_admin/app.py
from wsgiref.simple_server import make_server
import json
import logging
import re

from role_admin.config import HOST, PORT, configure_logging
from role_admin.database.database import SessionLocal
from role_admin.repositories.sqlalchemy import (
    SqlalchemyRoleRepository, SqlalchemyPrivilegeRepository, SqlalchemyRolePrivilegeRepository,
    SqlalchemyPersonRepository, SqlalchemyUnitOfWork
)
from role_admin.services.exceptions import RoleNotFoundError, InvalidRoleViewError
from role_admin.services.role_service import RoleService
from role_admin.services.role_view import RoleView
from role_admin.services.validation import ValidationResult, ROLE_NAME_REQUIRED

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        return json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise ValueError("Invalid or missing JSON body.")

def get_role_view(environ, role_id=None):
    view = RoleView.from_request(get_request_data(environ), role_id)
    prior = ValidationResult.ok()
    if not view.name:
        prior = prior.with_error("Name", ROLE_NAME_REQUIRED)
    return view, prior

def validation_error(result):
    return '400 Bad Request', json.dumps({"errors": result.to_dict()})

def handle_exception(e):
    error_map = {
        RoleNotFoundError: "404 Not Found",
        InvalidRoleViewError: "400 Bad Request",
        ValueError: "400 Bad Request",
    }
    status = error_map.get(type(e), "500 Internal Server Error")
    if status.startswith("500"):
        logger.exception("Unhandled error while processing request")
    return status, json.dumps({"error": str(e)})

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (의존성 주입 및 라우팅)
# --------------------------------------------------------------------------

def create_role_service(db_session):
    return RoleService(
        role_repo=SqlalchemyRoleRepository(db_session),
        privilege_repo=SqlalchemyPrivilegeRepository(db_session),
        role_privilege_repo=SqlalchemyRolePrivilegeRepository(db_session),
        person_repo=SqlalchemyPersonRepository(db_session),
        unit_of_work=SqlalchemyUnitOfWork(db_session),
    )

ROLE_ID = r'([a-zA-Z0-9_-]+)'

def application(environ, start_response):
    db_session = SessionLocal()
    try:
        # 1. 의존성 생성 (Repositories -> Services) 후 environ을 통해 핸들러에 전달
        environ['services'] = {'roles': create_role_service(db_session)}

        # 2. 라우팅 및 핸들러 실행
        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "")

        routes = [
            ('GET', r'^/v1/privileges/tree$', get_privilege_tree_handler),
            ('GET', r'^/v1/roles$', list_roles_handler),
            ('POST', r'^/v1/roles$', create_role_handler),
            ('GET', rf'^/v1/roles/{ROLE_ID}$', get_role_handler),
            ('PUT', rf'^/v1/roles/{ROLE_ID}$', edit_role_handler),
            ('DELETE', rf'^/v1/roles/{ROLE_ID}$', delete_role_handler),
        ]

        handler, path_args = None, []
        for route_method, pattern, route_handler in routes:
            if method == route_method and (match := re.match(pattern, path)):
                handler, path_args = route_handler, match.groups()
                break

        if handler:
            status, response_body = handler(environ, *path_args)
        else:
            status, response_body = '404 Not Found', json.dumps({'error': 'Not Found'})

    except Exception as e:
        status, response_body = handle_exception(e)
    finally:
        db_session.close()

    start_response(status, [("Content-Type", "application/json")])
    return [response_body.encode("utf-8")]

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def get_privilege_tree_handler(environ, *args):
    tree = environ['services']['roles'].get_privilege_tree()
    return '200 OK', json.dumps(tree.to_dict())

def list_roles_handler(environ, *args):
    roles = environ['services']['roles'].list_roles()
    return '200 OK', json.dumps({"roles": roles})

def create_role_handler(environ, *args):
    service = environ['services']['roles']
    view, prior = get_role_view(environ)
    result = service.can_create(view, prior)
    if not result.is_valid:
        return validation_error(result)
    role = service.create(view)
    return '201 Created', json.dumps(role)

def get_role_handler(environ, role_id):
    view = environ['services']['roles'].get_view(role_id)
    return '200 OK', json.dumps(view.to_dict())

def edit_role_handler(environ, role_id):
    service = environ['services']['roles']
    view, prior = get_role_view(environ, role_id)
    result = service.can_edit(view, prior)
    if not result.is_valid:
        return validation_error(result)
    role = service.edit(view)
    return '200 OK', json.dumps(role)

def delete_role_handler(environ, role_id):
    environ['services']['roles'].delete(role_id)
    return '204 No Content', ''

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    configure_logging()
    with make_server(HOST, PORT, application) as httpd:
        logger.info("Serving role administration API on port %d...", PORT)
        httpd.serve_forever()
