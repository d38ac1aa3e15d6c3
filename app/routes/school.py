from flask import Blueprint, render_template, request, current_app, make_response
from app.forms.school_form import SchoolFormController, SubmitResult
from app.services.image_upload import PlaceholderImageUploader
from app.services.navigation import RefreshNavigator
from app.services.notification_service import FlashNotifier

bp = Blueprint('school', __name__)

def build_form_controller(navigator):
    """Wire the add-school form to the database, flash messages and the response"""
    config = current_app.config
    return SchoolFormController(
        storage=current_app.extensions['school_storage'],
        notifier=FlashNotifier(),
        navigator=navigator,
        uploader=PlaceholderImageUploader(config['SCHOOL_PLACEHOLDER_IMAGE_URL']),
        submit_delay=config['SCHOOL_SUBMIT_DELAY'],
        redirect_delay=config['SCHOOL_REDIRECT_DELAY'],
        schedule=navigator.schedule,
    )

@bp.route('/add-school', methods=['GET', 'POST'])
def add_school():
    navigator = RefreshNavigator()
    form = build_form_controller(navigator)

    if request.method == 'GET':
        return render_template('school/add.html', form=form)

    form.update_fields(request.form)

    if request.form.get('action') == 'upload':
        url = form.upload_image(request.files.get('image_file'))
        if url is None:
            current_app.logger.info("Image upload requested without a file")
        return render_template('school/add.html', form=form)

    result = form.submit()

    if result.status == SubmitResult.INVALID:
        current_app.logger.info(f"Rejected school submission: {', '.join(sorted(result.errors))}")
        return render_template('school/add.html', form=form), 400

    if result.status == SubmitResult.FAILED:
        return render_template('school/add.html', form=form), 500

    response = make_response(render_template('school/add.html', form=form))
    refresh = navigator.refresh_header()
    if refresh:
        response.headers['Refresh'] = refresh
    return response

@bp.route('/show-schools')
def show_schools():
    storage = current_app.extensions['school_storage']
    schools = storage.get_schools()
    return render_template('school/index.html', schools=schools)
