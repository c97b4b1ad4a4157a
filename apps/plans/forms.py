from django import forms

# Zakres kolumny PositiveIntegerField (goal_amount, target, logged)
MAX_AMOUNT = 2147483647


class PlanForm(forms.Form):
    """
    Walidacja kształtu payloadu planu. Kwotę, strategię i zakres dat
    sprawdza dopiero alokator (żeby błędy miały jeden format).
    """
    name = forms.CharField(max_length=255)
    goal_amount = forms.IntegerField(max_value=MAX_AMOUNT)
    start_date = forms.DateField(input_formats=['%Y-%m-%d'])
    end_date = forms.DateField(input_formats=['%Y-%m-%d'])
    strategy = forms.CharField(max_length=50, required=False)
    intensity = forms.CharField(max_length=50, required=False)
    weekend_rule = forms.CharField(max_length=20, required=False)
    content_type = forms.CharField(max_length=100, required=False)
    activity_type = forms.CharField(max_length=100, required=False)
    display_settings = forms.JSONField(required=False)

    def clean_display_settings(self):
        value = self.cleaned_data.get('display_settings')
        if value in (None, ''):
            return {}
        if not isinstance(value, dict):
            raise forms.ValidationError("display_settings must be an object")
        return value


class ProgressForm(forms.Form):
    date = forms.DateField(input_formats=['%Y-%m-%d'])
    count = forms.IntegerField(min_value=0, max_value=MAX_AMOUNT)
