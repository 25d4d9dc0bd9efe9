# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Páginas do painel
    path('', include('apps.core.urls')),
    path('', include('apps.empreendimentos.urls')),
    path('', include('apps.indicacoes.urls')),
    path('', include('apps.relatorios.urls')),

    # API JSON (protegida pelo ServiceTokenMiddleware)
    path('api/', include('apps.core.urls_api')),
    path('api/', include('apps.empreendimentos.urls_api')),
    path('api/', include('apps.indicacoes.urls_api')),

    # Redirecionamentos úteis
    path('painel/', RedirectView.as_view(pattern_name='core:home', permanent=False)),
]

# Servir arquivos estáticos em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

    # Debug Toolbar se disponível
    try:
        import debug_toolbar

        urlpatterns = [
                          path('__debug__/', include(debug_toolbar.urls)),
                      ] + urlpatterns
    except ImportError:
        pass

# Customizar títulos do admin
admin.site.site_header = 'Painel Metrocasa Admin'
admin.site.site_title = 'Painel Metrocasa'
admin.site.index_title = 'Administração do Sistema'
