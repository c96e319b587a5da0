"""Dart source templates rendered by the generators.

Placeholders use the ``{{ key|filter }}`` syntax understood by
:class:`boilr.template.TemplateRenderer`. Feature, page, widget and provider
templates receive the requested name as ``name`` and case it with the
``snake``, ``camel`` and ``pascal`` filters; project templates receive
:meth:`boilr.config.ProjectConfig.context`.
"""

from __future__ import annotations

__all__ = [
    "FEATURE_DIRECTORIES",
    "FEATURE_TEMPLATES",
    "PROJECT_DEPENDENCIES",
    "PROJECT_DIRECTORIES",
    "PROJECT_TEMPLATES",
    "PAGE_TEMPLATE",
    "PROVIDER_TEMPLATE",
    "WIDGET_TEMPLATE",
]


FEATURE_DIRECTORIES = (
    "data/models",
    "data/repositories",
    "data/datasources",
    "domain/entities",
    "domain/usecases",
    "domain/repositories",
    "presentation/pages",
    "presentation/providers",
    "presentation/widgets",
)

ENTITY_TEMPLATE = """import 'package:equatable/equatable.dart';

class {{ name|pascal }}Entity extends Equatable {
  final int id;
  final String name;
  final String? description;

  const {{ name|pascal }}Entity({
    required this.id,
    required this.name,
    this.description,
  });

  @override
  List<Object?> get props => [id, name, description];
}
"""

MODEL_TEMPLATE = """import 'package:equatable/equatable.dart';
import '../../domain/entities/{{ name|snake }}_entity.dart';

class {{ name|pascal }}Model extends Equatable {
  final int id;
  final String name;
  final String? description;

  const {{ name|pascal }}Model({
    required this.id,
    required this.name,
    this.description,
  });

  factory {{ name|pascal }}Model.fromJson(Map<String, dynamic> json) {
    return {{ name|pascal }}Model(
      id: json['id'] as int,
      name: json['name'] as String,
      description: json['description'] as String?,
    );
  }

  Map<String, dynamic> toJson() {
    return {
      'id': id,
      'name': name,
      'description': description,
    };
  }

  {{ name|pascal }}Entity toEntity() {
    return {{ name|pascal }}Entity(
      id: id,
      name: name,
      description: description,
    );
  }

  @override
  List<Object?> get props => [id, name, description];
}
"""

REPOSITORY_TEMPLATE = """import 'package:dartz/dartz.dart';
import '../../../../core/error/failures.dart';
import '../entities/{{ name|snake }}_entity.dart';

abstract class {{ name|pascal }}Repository {
  Future<Either<Failure, List<{{ name|pascal }}Entity>>> get{{ name|pascal }}s();
  Future<Either<Failure, {{ name|pascal }}Entity>> get{{ name|pascal }}ById(int id);
}
"""

REPOSITORY_IMPL_TEMPLATE = """import 'package:dartz/dartz.dart';
import 'package:dio/dio.dart';
import '../../../../core/error/failures.dart';
import '../../domain/entities/{{ name|snake }}_entity.dart';
import '../../domain/repositories/{{ name|snake }}_repository.dart';
import '../models/{{ name|snake }}_model.dart';

class {{ name|pascal }}RepositoryImpl implements {{ name|pascal }}Repository {
  final Dio _dio;

  {{ name|pascal }}RepositoryImpl(this._dio);

  @override
  Future<Either<Failure, List<{{ name|pascal }}Entity>>> get{{ name|pascal }}s() async {
    try {
      final response = await _dio.get('/{{ name|snake }}s');
      final List<dynamic> data = response.data;
      final models = data.map((json) => {{ name|pascal }}Model.fromJson(json)).toList();
      final entities = models.map((model) => model.toEntity()).toList();
      return Right(entities);
    } catch (e) {
      return Left(ServerFailure(e.toString()));
    }
  }

  @override
  Future<Either<Failure, {{ name|pascal }}Entity>> get{{ name|pascal }}ById(int id) async {
    try {
      final response = await _dio.get('/{{ name|snake }}s/$id');
      final model = {{ name|pascal }}Model.fromJson(response.data);
      return Right(model.toEntity());
    } catch (e) {
      return Left(ServerFailure(e.toString()));
    }
  }
}
"""

USECASE_TEMPLATE = """import 'package:dartz/dartz.dart';
import '../../../../core/error/failures.dart';
import '../entities/{{ name|snake }}_entity.dart';
import '../repositories/{{ name|snake }}_repository.dart';

class Get{{ name|pascal }}sUseCase {
  final {{ name|pascal }}Repository _repository;

  Get{{ name|pascal }}sUseCase(this._repository);

  Future<Either<Failure, List<{{ name|pascal }}Entity>>> call() async {
    return await _repository.get{{ name|pascal }}s();
  }
}
"""

FEATURE_PROVIDER_TEMPLATE = """import 'package:flutter_riverpod/flutter_riverpod.dart';
import '../../../../core/network/dio_client.dart';
import '../../data/repositories/{{ name|snake }}_repository_impl.dart';
import '../../domain/usecases/get_{{ name|snake }}s_usecase.dart';

final {{ name|camel }}RepositoryProvider = Provider((ref) {
  return {{ name|pascal }}RepositoryImpl(DioClient.instance);
});

final get{{ name|pascal }}sUseCaseProvider = Provider((ref) {
  final repository = ref.watch({{ name|camel }}RepositoryProvider);
  return Get{{ name|pascal }}sUseCase(repository);
});
"""

FEATURE_PAGE_TEMPLATE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';

class {{ name|pascal }}Page extends ConsumerWidget {
  const {{ name|pascal }}Page({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    return Scaffold(
      appBar: AppBar(
        title: const Text('{{ name|pascal }}s'),
      ),
      body: const Center(
        child: Text('{{ name|pascal }} Page'),
      ),
    );
  }
}
"""

# (path relative to the feature directory, template)
FEATURE_TEMPLATES = (
    ("domain/entities/{{ name|snake }}_entity.dart", ENTITY_TEMPLATE),
    ("data/models/{{ name|snake }}_model.dart", MODEL_TEMPLATE),
    ("domain/repositories/{{ name|snake }}_repository.dart", REPOSITORY_TEMPLATE),
    ("data/repositories/{{ name|snake }}_repository_impl.dart", REPOSITORY_IMPL_TEMPLATE),
    ("domain/usecases/get_{{ name|snake }}s_usecase.dart", USECASE_TEMPLATE),
    ("presentation/providers/{{ name|snake }}_provider.dart", FEATURE_PROVIDER_TEMPLATE),
    ("presentation/pages/{{ name|snake }}_page.dart", FEATURE_PAGE_TEMPLATE),
)

PAGE_TEMPLATE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';

final {{ name|camel }}Provider = StateProvider<bool>((ref) => false);

class {{ name|pascal }} extends ConsumerWidget {
  const {{ name|pascal }}({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    final isLoading = ref.watch({{ name|camel }}Provider);

    return Scaffold(
      appBar: AppBar(
        title: const Text('{{ name|pascal }}'),
      ),
      body: Center(
        child: isLoading
            ? const CircularProgressIndicator()
            : const Text('{{ name|pascal }}'),
      ),
    );
  }
}
"""

WIDGET_TEMPLATE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';

class {{ name|pascal }} extends ConsumerWidget {
  const {{ name|pascal }}({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    return Container();
  }
}
"""

PROVIDER_TEMPLATE = """import 'package:flutter_riverpod/flutter_riverpod.dart';

final {{ name|camel }}Provider = StateProvider<bool>((ref) => false);

class {{ name|pascal }} {
  static void update{{ name|pascal }}State(WidgetRef ref, bool value) {
    ref.read({{ name|camel }}Provider.notifier).state = value;
  }
}
"""

PROJECT_DIRECTORIES = (
    "core/constants",
    "core/network/interceptors",
    "core/storage",
    "core/router",
    "core/error",
    "features/auth/presentation/pages",
    "features/home/presentation/pages",
    "shared/widgets",
    "shared/providers",
    "shared/functions",
    "shared/enums",
    "shared/validators",
)

PROJECT_DEPENDENCIES = """\
  # State Management
  flutter_riverpod: ^2.4.9
  riverpod_annotation: ^2.3.3

  # Navigation
  go_router: ^12.1.3

  # HTTP Client
  dio: ^5.9.0
  curl_logger_dio_interceptor: ^1.0.0

  # Local Storage
  shared_preferences: ^2.2.2

  # Functional Programming
  dartz: ^0.10.1

  # Utilities
  equatable: ^2.0.5
  logger: ^2.0.2+1

"""

DIO_CLIENT_TEMPLATE = """import 'package:dio/dio.dart';
import 'interceptors/auth_interceptor.dart';
import 'interceptors/logging_interceptor.dart';

class DioClient {
  static final Dio _dio = Dio(
    BaseOptions(
      baseUrl: 'https://api.example.com',
      connectTimeout: const Duration(seconds: 10),
      receiveTimeout: const Duration(seconds: 10),
      headers: {
        'Content-Type': 'application/json',
        'Accept': 'application/json',
      },
    ),
  )..interceptors.addAll([
    LoggingInterceptor(),
    AuthInterceptor(),
  ]);

  static Dio get instance => _dio;
}
"""

AUTH_INTERCEPTOR_TEMPLATE = """import 'package:dio/dio.dart';
import '../../storage/token_manager.dart';

class AuthInterceptor extends Interceptor {
  @override
  void onRequest(RequestOptions options, RequestInterceptorHandler handler) async {
    final token = await TokenManager.getToken();
    if (token != null) {
      options.headers['Authorization'] = 'Bearer $token';
    }
    handler.next(options);
  }

  @override
  void onError(DioException err, ErrorInterceptorHandler handler) async {
    if (err.response?.statusCode == 401) {
      await TokenManager.clearTokens();
    }
    handler.next(err);
  }
}
"""

LOGGING_INTERCEPTOR_TEMPLATE = """import 'package:dio/dio.dart';

class LoggingInterceptor extends Interceptor {
  @override
  void onRequest(RequestOptions options, RequestInterceptorHandler handler) {
    print('REQUEST[${options.method}] => PATH: ${options.path}');
    handler.next(options);
  }

  @override
  void onResponse(Response response, ResponseInterceptorHandler handler) {
    print('RESPONSE[${response.statusCode}] => PATH: ${response.requestOptions.path}');
    handler.next(response);
  }

  @override
  void onError(DioException err, ErrorInterceptorHandler handler) {
    print('ERROR[${err.response?.statusCode}] => PATH: ${err.requestOptions.path}');
    print('Message: ${err.message}');
    handler.next(err);
  }
}
"""

TOKEN_MANAGER_TEMPLATE = """import 'package:shared_preferences/shared_preferences.dart';

class TokenManager {
  static const String _tokenKey = 'auth_token';
  static const String _refreshTokenKey = 'refresh_token';

  static Future<void> saveToken(String token) async {
    final prefs = await SharedPreferences.getInstance();
    await prefs.setString(_tokenKey, token);
  }

  static Future<String?> getToken() async {
    final prefs = await SharedPreferences.getInstance();
    return prefs.getString(_tokenKey);
  }

  static Future<void> clearTokens() async {
    final prefs = await SharedPreferences.getInstance();
    await prefs.remove(_tokenKey);
    await prefs.remove(_refreshTokenKey);
  }
}
"""

FAILURES_TEMPLATE = """abstract class Failure {
  final String message;
  const Failure(this.message);
}

class ServerFailure extends Failure {
  const ServerFailure([String message = 'Server error occurred']) : super(message);
}

class NetworkFailure extends Failure {
  const NetworkFailure([String message = 'Network error occurred']) : super(message);
}

class ValidationFailure extends Failure {
  const ValidationFailure([String message = 'Validation error occurred']) : super(message);
}
"""

ROUTER_TEMPLATE = """import 'package:flutter_riverpod/flutter_riverpod.dart';
import 'package:go_router/go_router.dart';
import '../../features/auth/presentation/pages/login_page.dart';
import '../../features/home/presentation/pages/home_page.dart';

class Router {
  static const String login = '/login';
  static const String loginName = 'login';
  static const String home = '/home';
  static const String homeName = 'home';
}

final routerProvider = Provider<GoRouter>((ref) {
  return GoRouter(
    initialLocation: Router.login,
    routes: [
      GoRoute(
        path: Router.login,
        name: Router.loginName,
        builder: (context, state) => const LoginPage(),
      ),
      GoRoute(
        path: Router.home,
        name: Router.homeName,
        builder: (context, state) => const HomePage(),
      ),
    ],
  );
});
"""

MAIN_TEMPLATE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';
import 'core/router/app_router.dart';

void main() {
  runApp(
    const ProviderScope(
      child: MyApp(),
    ),
  );
}

class MyApp extends ConsumerWidget {
  const MyApp({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    final router = ref.watch(routerProvider);

    return MaterialApp.router(
      title: '{{ name }}',
      routerConfig: router,
    );
  }
}
"""

EXAMPLE_PAGE_TEMPLATE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';

class {{ title }}Page extends ConsumerWidget {
  const {{ title }}Page({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    return Scaffold(
      appBar: AppBar(
        title: const Text('{{ title }}'),
      ),
      body: const Center(
        child: Text('{{ title }} Page'),
      ),
    );
  }
}
"""

# (path relative to lib/, template, extra context)
PROJECT_TEMPLATES = (
    ("core/network/dio_client.dart", DIO_CLIENT_TEMPLATE, {}),
    ("core/network/interceptors/auth_interceptor.dart", AUTH_INTERCEPTOR_TEMPLATE, {}),
    ("core/network/interceptors/logging_interceptor.dart", LOGGING_INTERCEPTOR_TEMPLATE, {}),
    ("core/storage/token_manager.dart", TOKEN_MANAGER_TEMPLATE, {}),
    ("core/error/failures.dart", FAILURES_TEMPLATE, {}),
    ("core/router/app_router.dart", ROUTER_TEMPLATE, {}),
    ("main.dart", MAIN_TEMPLATE, {}),
    ("features/auth/presentation/pages/login_page.dart", EXAMPLE_PAGE_TEMPLATE, {"title": "Login"}),
    ("features/home/presentation/pages/home_page.dart", EXAMPLE_PAGE_TEMPLATE, {"title": "Home"}),
)
